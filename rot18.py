import sys
import argparse
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple

__version__ = "1.0.0"

OFFSET_ROT13 = 13
OFFSET_ROT5 = 5

# Invalid UTF-8 in files and pipes passes through as lone surrogates
STREAM_ERRORS = "surrogateescape"

# Verbose mode (disabled by default, enabled with --verbose)
VERBOSE = False

def log_info(msg: str):
    """Print info message only if verbose mode is enabled."""
    if VERBOSE:
        print(f"[INFO] {msg}", file=sys.stderr)

def log_warn(msg: str):
    """Print warning message only if verbose mode is enabled."""
    if VERBOSE:
        print(f"[WARN] {msg}", file=sys.stderr)

# ==========================================
#  TRANSFORM: ROT13 / ROT5 / ROT18
# ==========================================

def _rotate(char: str, letters: bool, digits: bool) -> str:
    """
    Rotate a single ASCII character.

    Each range is split at its midpoint and the halves are swapped with a
    fixed offset, so applying this twice returns the original character.
    Anything outside A-Z, a-z and 0-9 (non-ASCII included) is returned as is.
    """
    if letters:
        if 'A' <= char <= 'M' or 'a' <= char <= 'm':
            return chr(ord(char) + OFFSET_ROT13)
        if 'N' <= char <= 'Z' or 'n' <= char <= 'z':
            return chr(ord(char) - OFFSET_ROT13)
    if digits:
        if '0' <= char <= '4':
            return chr(ord(char) + OFFSET_ROT5)
        if '5' <= char <= '9':
            return chr(ord(char) - OFFSET_ROT5)
    return char


def rot13(text: str) -> str:
    """Apply ROT13 to ASCII letters only."""
    return ''.join(_rotate(char, True, False) for char in text)


def rot5(text: str) -> str:
    """Apply ROT5 to ASCII digits only."""
    return ''.join(_rotate(char, False, True) for char in text)


def rot18(text: str) -> str:
    """
    Apply ROT18 (ROT13 on letters, ROT5 on digits) in a single pass.

    The result always has the same length as the input and
    rot18(rot18(text)) == text for any string.

    >>> rot18("Have a nice day!")
    'Unir n avpr qnl!'
    >>> rot18("0816")
    '5361'
    """
    return ''.join(_rotate(char, True, True) for char in text)


def count_non_ascii(text: str) -> int:
    return sum(1 for char in text if ord(char) > 0x7F)

# ==========================================
#  FRAMEWORK: Abstract Base Class & Registry
# ==========================================

class CipherStrategy(ABC):
    """Abstract base class that all ciphers must implement."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The command-line name for this cipher."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Short description for help text."""
        pass

    @abstractmethod
    def encode(self, text: str) -> str:
        pass

    @abstractmethod
    def decode(self, text: str) -> str:
        pass

CIPHER_REGISTRY: Dict[str, CipherStrategy] = {}

def register_cipher(cls):
    """Decorator to auto-register ciphers."""
    cipher = cls()
    CIPHER_REGISTRY[cipher.name] = cipher
    return cls

def get_cipher(name: str) -> CipherStrategy:
    """Look up a registered cipher by its command-line name."""
    try:
        return CIPHER_REGISTRY[name]
    except KeyError:
        available = ", ".join(sorted(CIPHER_REGISTRY))
        raise KeyError(f"Unknown cipher '{name}'. Available: {available}") from None


class InvolutionCipher(CipherStrategy):
    """
    Base for ciphers that are their own inverse.

    Subclasses provide `transform`; encode and decode both delegate to it.
    """

    @abstractmethod
    def transform(self, text: str) -> str:
        pass

    def encode(self, text: str) -> str:
        return self.transform(text)

    def decode(self, text: str) -> str:
        return self.transform(text)


@register_cipher
class Rot18Cipher(InvolutionCipher):
    name = "rot18"
    description = "ROT13 on letters plus ROT5 on digits (default)."

    def transform(self, text: str) -> str:
        return rot18(text)


@register_cipher
class Rot13Cipher(InvolutionCipher):
    name = "rot13"
    description = "Letters only: each letter moves 13 places, digits untouched."

    def transform(self, text: str) -> str:
        return rot13(text)


@register_cipher
class Rot5Cipher(InvolutionCipher):
    name = "rot5"
    description = "Digits only: each digit moves 5 places, letters untouched."

    def transform(self, text: str) -> str:
        return rot5(text)

# ==========================================
#  CLI LOGIC
# ==========================================

def list_ciphers():
    """Print all available ciphers."""
    print("\nAvailable Ciphers:")
    print("=" * 60)
    for name, cipher in CIPHER_REGISTRY.items():
        print(f"  {name:<8} {cipher.description}")
    print("=" * 60)
    print(f"\nTotal: {len(CIPHER_REGISTRY)} cipher(s) registered.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rot18",
        description="ROT18 substitution cipher (ROT13 letters + ROT5 digits). "
                    "Encoding and decoding are the same operation.",
        formatter_class=argparse.RawTextHelpFormatter
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    method_help = "\n".join(f"  {k:<8}: {v.description}" for k, v in CIPHER_REGISTRY.items())
    parser.add_argument("-m", "--method", choices=list(CIPHER_REGISTRY.keys()), default="rot18",
                        help=f"Select cipher algorithm (default: rot18).\n{method_help}")

    # Encode and decode are the same involution; the flags only document intent
    action_group = parser.add_mutually_exclusive_group()
    action_group.add_argument("-e", "--encode", action="store_true", help="Encode mode")
    action_group.add_argument("-d", "--decode", action="store_true", help="Decode mode")
    action_group.add_argument("-l", "--list", action="store_true", help="List all available ciphers")

    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable verbose output (info and warning messages)")

    io_group = parser.add_mutually_exclusive_group()
    io_group.add_argument("-t", "--text", help="Direct text input")
    io_group.add_argument("-i", "--input", help="Input file path")

    parser.add_argument("-o", "--output", help="Output file path")
    parser.add_argument("words", nargs="*", metavar="TEXT",
                        help="Text to transform (joined with spaces)")
    return parser


def read_stdin() -> str:
    # Undecodable bytes survive as surrogates and are restored on write
    stream = getattr(sys.stdin, "buffer", None)
    if stream is None:
        return sys.stdin.read()
    return stream.read().decode("utf-8", STREAM_ERRORS)


def write_stdout(text: str):
    stream = getattr(sys.stdout, "buffer", None)
    if stream is None:
        sys.stdout.write(text)
        return
    sys.stdout.flush()
    stream.write(text.encode("utf-8", STREAM_ERRORS))
    stream.flush()


def read_source(args) -> Tuple[str, bool]:
    """
    Resolve the input text.

    Returns: (source_text, from_argument). Text given on the command line
    gets a trailing newline on output; stream input is echoed verbatim,
    line endings and invalid UTF-8 bytes included.
    """
    if args.text is not None:
        log_info("Reading input from --text")
        return args.text, True
    if args.input:
        log_info(f"Reading input from file '{args.input}'")
        try:
            with open(args.input, "r", encoding="utf-8", errors=STREAM_ERRORS, newline="") as f:
                return f.read(), False
        except FileNotFoundError:
            sys.exit(f"Error: File '{args.input}' not found.")
        except OSError as e:
            sys.exit(f"Error reading input: {e}")
    if args.words:
        log_info("Reading input from positional arguments")
        return " ".join(args.words), True
    if not sys.stdin.isatty():
        log_info("Reading input from stdin")
        return read_stdin(), False

    print("[ROT18] Paste input below. Ctrl+D (Unix) or Ctrl+Z (Win) to end:", file=sys.stderr)
    try:
        return read_stdin(), False
    except KeyboardInterrupt:
        sys.exit(0)


def main(argv: Optional[List[str]] = None) -> int:
    global VERBOSE

    parser = build_parser()
    args = parser.parse_args(argv)
    VERBOSE = args.verbose

    if args.list:
        list_ciphers()
        return 0

    if args.words and (args.text is not None or args.input):
        parser.error("positional TEXT cannot be combined with -t/--text or -i/--input")

    # 1. READ INPUT
    source_text, from_argument = read_source(args)

    # 2. TRANSFORM
    cipher = get_cipher(args.method)
    log_info(f"Using cipher '{cipher.name}'")
    non_ascii = count_non_ascii(source_text)
    if non_ascii:
        log_warn(f"{non_ascii} non-ASCII character(s) passed through unchanged.")

    result = cipher.encode(source_text)
    log_info(f"Transformed {len(source_text)} character(s).")

    if from_argument:
        result += "\n"

    # 3. WRITE OUTPUT
    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8", errors=STREAM_ERRORS, newline="") as f:
                f.write(result)
        except OSError as e:
            sys.exit(f"Error writing output: {e}")
    else:
        write_stdout(result)
    return 0

if __name__ == "__main__":
    sys.exit(main())
