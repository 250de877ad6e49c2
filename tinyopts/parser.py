import logging
import sys
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

logger = logging.getLogger(__name__)

FLAG_VALUE = "true"
HELP_SHORT = "-h"
HELP_LONG = "--help"


@dataclass(frozen=True)
class OptionSpec:
    """One recognized option; an empty ``long`` never matches."""
    short: str
    long: str
    requires_value: bool = False
    default_value: str = ""
    help_text: str = ""


class ArgumentParser:
    """Tolerant parser over raw argument tokens, program name excluded."""

    def __init__(self, args: Optional[Sequence[str]] = None, specs: Sequence[OptionSpec] = (), description: str = ""):
        self.args: List[str] = list(sys.argv[1:] if args is None else args)
        self.specs: List[OptionSpec] = list(specs)
        self.description = description
        self._values: Dict[str, str] = {}
        self._positionals: List[str] = []

    @property
    def values(self) -> Dict[str, str]:
        return dict(self._values)

    @property
    def positionals(self) -> List[str]:
        return list(self._positionals)

    def parse(self, halt_on_help: bool = True) -> None:
        self._values = {}
        self._positionals = []

        for spec in self.specs:
            self.resolve_option(spec)

        if self.help_requested():
            logger.debug("help requested")
            self.print_help()
            if halt_on_help:
                sys.exit(0)

        self._collect_positionals()

    def parse_with_required_args(self, halt_on_help: bool, min_args: int, max_args: int = -1) -> bool:
        """Parse, then bound the positional count (``max_args == -1`` is unbounded)."""
        self.parse(halt_on_help)

        count = self.get_positional_count()
        in_range = count >= min_args and (max_args == -1 or count <= max_args)
        if not in_range:
            logger.debug("expected %d..%s positional arguments, got %d",
                         min_args, "" if max_args == -1 else max_args, count)
            if not self.help_requested():
                self.print_help()
            if halt_on_help:
                sys.exit(0)
        return in_range

    def resolve_option(self, spec: OptionSpec) -> str:
        value = spec.default_value
        flag_seen = False

        for i, arg in enumerate(self.args):
            if arg == spec.short:
                if not spec.requires_value:
                    flag_seen = True
                elif i + 1 < len(self.args) and not self.args[i + 1].startswith("-"):
                    value = self.args[i + 1]
                else:
                    logger.debug("no value follows %s, keeping %r", arg, value)
            if spec.long and arg.startswith(spec.long):
                if not spec.requires_value:
                    flag_seen = True
                elif "=" in arg:
                    value = arg[arg.index("=") + 1:]

        if flag_seen:
            value = FLAG_VALUE
        self._values[spec.short] = value
        return value

    def help_requested(self) -> bool:
        return any(arg == HELP_SHORT or arg.startswith(HELP_LONG) for arg in self.args)

    def _collect_positionals(self) -> None:
        takes_value = {spec.short for spec in self.specs if spec.requires_value}
        known = {spec.short for spec in self.specs}

        i = 0
        while i < len(self.args):
            arg = self.args[i]
            if arg.startswith("-"):
                if arg in takes_value:
                    # the next token is the value, whatever it looks like
                    i += 1
                elif arg not in known and not any(spec.long and arg.startswith(spec.long) for spec in self.specs):
                    logger.debug("dropping unknown option %s", arg)
            else:
                self._positionals.append(arg)
            i += 1

    def format_help(self) -> str:
        lines = []
        if self.description:
            lines.append(self.description)

        if self.specs:
            short_width = max(len(spec.short) for spec in self.specs)
            long_width = max(len(spec.long) for spec in self.specs)
            for spec in self.specs:
                lines.append(f"  {spec.short.ljust(short_width)}  {spec.long.ljust(long_width)}  {spec.help_text}".rstrip())

        return "\n".join(lines)

    def print_help(self) -> None:
        text = self.format_help()
        if text:
            print(text)

    def get_value(self, short: str) -> str:
        return self._values.get(short, "")

    def get_positional_count(self) -> int:
        return len(self._positionals)

    def get_positional(self, index: int) -> str:
        if 0 <= index < len(self._positionals):
            return self._positionals[index]
        return ""


# Example usage
if __name__ == "__main__":
    options = [
        OptionSpec("-s", "--samplingRate", True, "48000", "Set Sampling Rate"),
        OptionSpec("-e", "--encoding", True, "PCM16", "Set Encoding PCM8, PCM16, PCM24, PCM32, PCMFLOAT"),
        OptionSpec("-c", "--channel", True, "2", "Set channel 2, 2.1, 4, 4.1, 5, 5.1, 5.1.2, 7.1"),
    ]
    parser = ArgumentParser(sys.argv[1:], options, "tinyopts  e.g. input1.pcm input2.pcm -s 44100")
    parser.parse_with_required_args(True, 1, -1)

    print(f"encoding:{parser.get_value('-e')}, samplingRate:{parser.get_value('-s')}, channel:{parser.get_value('-c')}")
    for i in range(parser.get_positional_count()):
        print(f"{i}:{parser.get_positional(i)}")
