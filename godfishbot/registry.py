"""Command table builder and help text generation."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from .config import BOT_VERSION


@dataclass
class CmdDef:
    descr: str
    usage: Optional[str] = None


@dataclass
class RandTextDef:
    file: str
    single_file: Optional[str]
    info: CmdDef


@dataclass
class RandImgDef:
    descr: str
    folder: str


@dataclass
class SoundDef:
    files: List[str]
    descr: Optional[str] = None


@dataclass
class CommandRegistry:
    """Collects the bot's commands; every method returns ``self`` for chaining."""

    txt_cmds: Dict[str, RandTextDef] = field(default_factory=dict)
    sounds: Dict[str, SoundDef] = field(default_factory=dict)
    images: Dict[str, str] = field(default_factory=dict)
    img_cmds: Dict[str, RandImgDef] = field(default_factory=dict)
    other_cmds: Dict[str, CmdDef] = field(default_factory=dict)

    def rand_text(
        self,
        cmd: str,
        usage: str,
        descr: str,
        opts_file: str,
        single_file: Optional[str] = None,
    ) -> "CommandRegistry":
        self.txt_cmds[cmd] = RandTextDef(opts_file, single_file, CmdDef(descr, usage))
        return self

    def rand_img(self, cmd: str, descr: str, folder: str) -> "CommandRegistry":
        self.img_cmds[cmd] = RandImgDef(descr, folder)
        return self

    def audio(self, cmd: str, files: Sequence[str], descr: Optional[str] = None) -> "CommandRegistry":
        self.sounds[cmd] = SoundDef(list(files), descr)
        return self

    def image(self, cmd: str, file: str) -> "CommandRegistry":
        self.images[cmd] = file
        return self

    def other(self, cmd: str, descr: str, usage: Optional[str] = None) -> "CommandRegistry":
        """Document a command registered elsewhere in the help message."""
        self.other_cmds[cmd] = CmdDef(descr, usage)
        return self

    def build_help(self) -> Tuple[str, Dict[str, CmdDef]]:
        """Return the full help text and the per-command help entries."""
        lines = [f"GodfishBot v{BOT_VERSION}", "Available commands:", ""]
        cmd_helps: Dict[str, CmdDef] = {
            "help": CmdDef(
                "Offers help for commands (or get a list of commands)",
                "/help [command]",
            )
        }
        lines.append("/help - Get this help message")

        lines += ["", "Random text commands:"]
        for cmd, txt in sorted(self.txt_cmds.items()):
            lines.append(f"{txt.info.usage or '/' + cmd} - {txt.info.descr}")
            cmd_helps[cmd] = txt.info

        lines += ["", "Sound commands:"]
        for cmd, sound in sorted(self.sounds.items()):
            lines.append(f"/{cmd} - {sound.descr}" if sound.descr else f"/{cmd}")
            cmd_helps[cmd] = CmdDef(sound.descr or "Get a sound effect")

        lines += ["", "Image commands:"]
        for cmd in sorted(self.images):
            lines.append(f"/{cmd}")
            cmd_helps[cmd] = CmdDef("Get a specific image")

        lines += ["", "Random image commands:"]
        for cmd, img in sorted(self.img_cmds.items()):
            lines.append(f"/{cmd} - {img.descr}")
            cmd_helps[cmd] = CmdDef(img.descr)

        lines += ["", "Other commands:"]
        for cmd, other in sorted(self.other_cmds.items()):
            lines.append(f"{other.usage or '/' + cmd} - {other.descr}")
            cmd_helps[cmd] = other

        return "\n".join(lines) + "\n", cmd_helps


def command_help(cmd_helps: Dict[str, CmdDef], cmd: str) -> str:
    """Help text for a single command, as sent by ``/help <cmd>``."""
    cmd_help = cmd_helps.get(cmd)
    if cmd_help is None:
        return "Command not found!"
    return f"Usage: {cmd_help.usage or cmd}\n\n{cmd_help.descr}"
