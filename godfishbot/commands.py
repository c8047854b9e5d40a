"""The bot's static command table."""
from __future__ import annotations

from .handlers.love_test import USAGE as LOVE_TEST_USAGE
from .registry import CommandRegistry

# command -> candidate files, one picked at random per use
SOUNDS = {
    "bitchwhere": ["bitchwhere.mp3"],
    "boahey": ["boahey.ogg"],
    "eeyup": ["eeyup.opus"],
    "eghugh": ["eghughehhhh.mp3"],
    "gasp": ["gasp.opus"],
    "heuldoch": ["heuldoch.ogg"],
    "okay": ["okay.mp3"],
    "truthahn": ["truthahn.ogg"],
    "ululu": ["ululu.opus"],
    "property": ["property.mp3", "property2.mp3"],
    "sixpack": ["sixpack.mp3"],
    "sexy": ["sexy.mp3"],
    "ayaya": ["ayaya1.mp3", "ayaya2.mp3"],
    "nigerundayo": ["nigerundayo.mp3"],
    "wow": ["wow.mp3", "wow2.mp3", "wow3.mp3"],
    "nneville": ["nneville.mp3"],
    "saido": ["saidochesto.mp3"],
    "ohyeah": ["ohyeah1.mp3", "ohyeah2.mp3"],
    "damedame": ["damedame.mp3"],
    "yeah": ["yeah.mp3"],
    "dingdong": ["dingdong.mp3"],
    "horn": ["horn.mp3"],
    "nani": ["nani.mp3"],
    "explosion": ["explosion1.mp3", "explosion2.mp3"],
    "french": ["french.mp3"],
    "chinese": ["chinese.mp3"],
    "friendship": ["friendship.mp3"],
    "selfie": ["selfie.mp3"],
    "baum": ["baum.mp3"],
    "dundundun": ["dundundun.mp3"],
    "sasgay": ["sasuke.mp3"],
    "naruto": ["naruto.mp3"],
    "alpakistan": ["oreimo.mp3"],
    "pling": ["pling.mp3"],
    "laugh": ["laugh.mp3"],
    "power": ["woahohohah.mp3"],
    "zawarudo": ["zawarudo.mp3"],
    "wah": ["wah.mp3"],
    "checkmate": ["checkometo.mp3"],
    "nintendo": ["daisy.mp3"],
    "heal": ["heal.mp3"],
    "mammamia": ["mammamia.mp3"],
    "morioh": ["morioh.mp3"],
    "youready": ["youready.mp3"],
    "herewego": ["herewego.mp3"],
    "again": ["again.mp3"],
    "uuuh": ["uuuh.mp3"],
    "fbi": ["fbi.mp3"],
    "rivalun": ["rivalun.mp3"],
    "confusion": ["iamconfusion.mp3"],
    "like": ["leonard.mp3"],
    "hiii": ["HIIII.wav"],
    "yay": ["YAY.wav"],
    "piedro": ["piedro.mp3"],
    "lvlup": ["lvlup.mp3"],
}

IMAGES = {
    "bully": "bully.jpg",
    "bully2": "bully2.jpg",
    "spicken": "spicken.jpg",
    "frenz": "frenz.jpg",
    "teacher": "teacher.jpg",
    "bullyback": "bullyback.jpg",
    "tease": "tease.jpg",
    "flashbacks": "flashback.jpg",
}


def build_registry() -> CommandRegistry:
    registry = (
        CommandRegistry()
        .rand_text("explode", "/explode [target]", "Explode [at someone]", "explode.txt", "explode_single.txt")
        .rand_text("kiss", "/kiss <target>", "Kiss someone", "kiss.txt")
        .rand_text("hug", "/hug <target>", "Hug someone", "hugs.txt")
        .rand_img("star", "Get a star", "stars/")
        .audio("arsam", ["failure.mp3"], "YOU FUCKING FAILURE!")
    )
    for cmd, files in SOUNDS.items():
        registry.audio(cmd, files)
    for cmd, file in IMAGES.items():
        registry.image(cmd, file)
    return (
        registry
        .other("cn", "Get a fact about Chuck Norris. (Powered by http://www.icndb.com)")
        .other("trump", "Get a Donald Trump quote. Powered by https://whatdoestrumpthink.com")
        .other("dadjoke", "Get a random dad joke from https://icanhazdadjoke.com/api")
        .other("catfact", "Get a random cat fact from https://cat-fact.herokuapp.com")
        .other("funfact", "Get a useless fact from https://uselessfacts.jsph.pl")
        .other(
            "doggo",
            "Get a random doggo from teh interwebs (may be filtered by breed)",
            "/doggo [breed]",
        )
        .other("testlove", "Test compatibility based on names. Totally scientifically correct!", LOVE_TEST_USAGE)
        .other("flausch", "Get a fluffy bunny gif")
    )
