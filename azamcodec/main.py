# AZAMCODEC ENGINE ->

import dataclasses as _dataclasses_module
import io as _io_module
import os as _os_module
import sys as _sys_module
import typing as _typing_module


class AzamDecodeError(ValueError):
    """Base class for malformed encoded input. ``position`` is a symbol offset or -1."""

    def __init__(self, message: str, position: int = -1):
        super().__init__(message)
        self.position = position


class InvalidCharacterError(AzamDecodeError):
    def __init__(self, char: str, position: int):
        super().__init__(f"Invalid encoded value (unknown char {char!r} at {position})", position)
        self.char = char


class IllegalLeadingNibbleError(AzamDecodeError):
    def __init__(self, position: int):
        super().__init__(f"Invalid encoded value ('g' cannot be a leading char, at {position})", position)


class UnterminatedSectionError(AzamDecodeError):
    def __init__(self, position: int):
        super().__init__(
            f"Invalid encoded value (does not end with lower nibble char, input ends at {position})",
            position
        )


class EmptyInputError(AzamDecodeError, EOFError):
    # Raised only at a fresh section boundary; decode_all_sections treats it as end of stream.
    def __init__(self, position: int):
        super().__init__(f"No section available at {position}", position)


class ValueOutOfRangeError(AzamDecodeError):
    def __init__(self, length: int, width: int, position: int):
        super().__init__(
            f"Encoded value at {position} is {length} bytes, too long for a {width * 8}-bit integer",
            position
        )
        self.length = length
        self.width = width


@_dataclasses_module.dataclass(frozen=True)
class Terminal:
    """Low-alphabet symbol: last nibble of a section."""
    nibble: int

    @property
    def value(self) -> int:
        return self.nibble


@_dataclasses_module.dataclass(frozen=True)
class Continuation:
    """High-alphabet symbol: any nibble of a section except the last."""
    nibble: int

    @property
    def value(self) -> int:
        return 0x10 | self.nibble


class SymbolCursor:
    """Sequential read position over an encoded string, shared across sections."""

    def __init__(self, text: str, position: int = 0):
        if not isinstance(text, str):
            raise TypeError("SymbolCursor expects an encoded string")
        if position < 0 or position > len(text):
            raise ValueError("Cursor position out of range")
        self.text = text
        self.position = position

    def read_symbol(self) -> str:
        if self.position >= len(self.text):
            return ""
        char = self.text[self.position]
        self.position += 1
        return char

    def exhausted(self) -> bool:
        return self.position >= len(self.text)


class _StreamCursor:
    """Adapts a file-like ``read(1)`` channel to the cursor protocol."""

    def __init__(self, source):
        self._source = source
        self.position = 0

    def read_symbol(self) -> str:
        chunk = self._source.read(1)
        if not chunk:
            return ""
        self.position += 1
        if isinstance(chunk, str):
            return chunk
        return chr(chunk[0])


class azamcodec:
    import numpy as np

    ENGINE_VERSION = "1.0.0"

    LOW_ALPHABET = "0123456789abcdef"
    HIGH_ALPHABET = "ghjkmnpqrstvwxyz"
    HIGH_ZERO = 0x10

    # Decode-side aliases; encoding only ever emits the canonical lower-case glyphs.
    NIBBLE_ALIASES = {
        0x00: "oO",
        0x01: "iIlL",
    }

    STREAM_CHUNK_SIZE = 64 * 1024

    _HIGH_FROM_HEX = str.maketrans(LOW_ALPHABET, HIGH_ALPHABET)

    @staticmethod
    def _build_symbol_table() -> "dict[str, _typing_module.Union[Terminal, Continuation]]":
        table = {}
        for nibble, char in enumerate(azamcodec.LOW_ALPHABET):
            table[char] = table[char.upper()] = Terminal(nibble)
        for nibble, char in enumerate(azamcodec.HIGH_ALPHABET):
            table[char] = table[char.upper()] = Continuation(nibble)
        for nibble, aliases in azamcodec.NIBBLE_ALIASES.items():
            for char in aliases:
                table[char] = Terminal(nibble)
        return table

    # ------------------------------------------------------------------
    # Alphabet
    # ------------------------------------------------------------------
    @staticmethod
    def symbol_for(value: int) -> str:
        """Canonical glyph for a nibble value 0x00-0x1F (0x10 and up are high-alphabet)."""
        if value & 0x10:
            return azamcodec.HIGH_ALPHABET[value & 0x0F]
        return azamcodec.LOW_ALPHABET[value & 0x0F]

    @staticmethod
    def resolve(char: str) -> "_typing_module.Optional[_typing_module.Union[Terminal, Continuation]]":
        return azamcodec.SYMBOLS.get(char)

    @staticmethod
    def nibble_for(char: str) -> "_typing_module.Optional[int]":
        """Nibble value 0x00-0x1F for ``char``, or None when it is not part of the alphabet."""
        symbol = azamcodec.SYMBOLS.get(char)
        if symbol is None:
            return None
        return symbol.value

    # ------------------------------------------------------------------
    # Minimal nibble form shared by both directions
    # ------------------------------------------------------------------
    @staticmethod
    def _minimal_hex(data: bytes) -> str:
        # Hex digits are exactly the low alphabet, one per nibble, most significant first.
        return data.hex().lstrip("0") or "0"

    @staticmethod
    def _pack_nibbles(digits: str) -> bytes:
        # An odd count means the minimal form dropped a leading zero nibble; restoring it
        # is the same as pairing with a trailing zero and shifting the result right by 4.
        if len(digits) % 2:
            digits = "0" + digits
        return bytes.fromhex(digits)

    @staticmethod
    def _section_from_hex(digits: str) -> str:
        return digits[:-1].translate(azamcodec._HIGH_FROM_HEX) + digits[-1]

    @staticmethod
    def _as_bytes(data) -> bytes:
        if isinstance(data, bytes):
            return data
        if isinstance(data, (bytearray, memoryview)):
            return bytes(data)
        raise TypeError("Expected bytes-like input")

    # ------------------------------------------------------------------
    # Encoder
    # ------------------------------------------------------------------
    @staticmethod
    def encode_section(data) -> str:
        return azamcodec._section_from_hex(azamcodec._minimal_hex(azamcodec._as_bytes(data)))

    @staticmethod
    def encode_sections(*arrays) -> str:
        """Concatenate one section per byte array, in order.

        Accepts either several bytes-like arguments or a single iterable of them.
        """
        if len(arrays) == 1 and not isinstance(arrays[0], (bytes, bytearray, memoryview)):
            arrays = tuple(arrays[0])
        return "".join(azamcodec.encode_section(array) for array in arrays)

    # ------------------------------------------------------------------
    # Decoder
    # ------------------------------------------------------------------
    @staticmethod
    def _resolve_at(char: str, position: int):
        symbol = azamcodec.SYMBOLS.get(char)
        if symbol is None:
            raise InvalidCharacterError(char, position)
        return symbol

    @staticmethod
    def _decode_from(cursor) -> bytes:
        start = cursor.position
        char = cursor.read_symbol()
        if not char:
            raise EmptyInputError(start)
        symbol = azamcodec._resolve_at(char, start)
        if symbol.value == azamcodec.HIGH_ZERO:
            raise IllegalLeadingNibbleError(start)

        digits = [azamcodec.LOW_ALPHABET[symbol.nibble]]
        while isinstance(symbol, Continuation):
            position = cursor.position
            char = cursor.read_symbol()
            if not char:
                raise UnterminatedSectionError(position)
            symbol = azamcodec._resolve_at(char, position)
            digits.append(azamcodec.LOW_ALPHABET[symbol.nibble])
        return azamcodec._pack_nibbles("".join(digits))

    @staticmethod
    def _cursor_for(source) -> SymbolCursor:
        if isinstance(source, SymbolCursor):
            return source
        if isinstance(source, str):
            return SymbolCursor(source)
        raise TypeError("Expected an encoded string or SymbolCursor")

    @staticmethod
    def decode_section(source) -> bytes:
        """Decode one section.

        ``source`` is an encoded string (decoded from its start) or a SymbolCursor,
        which is left positioned right after the section.
        """
        return azamcodec._decode_from(azamcodec._cursor_for(source))

    @staticmethod
    def _iter_sections(cursor):
        while True:
            start = cursor.position
            try:
                section = azamcodec._decode_from(cursor)
            except EmptyInputError:
                return
            yield start, section

    @staticmethod
    def decode_all_sections(text: str) -> "list[bytes]":
        return [section for _, section in azamcodec._iter_sections(azamcodec._cursor_for(text))]

    # ------------------------------------------------------------------
    # Integer projections
    # ------------------------------------------------------------------
    @staticmethod
    def _fixed_width_arrays(values, width: int) -> "list[bytes]":
        np = azamcodec.np
        if isinstance(values, np.ndarray):
            if values.dtype.kind not in ("i", "u"):
                raise TypeError(f"Expected an integer array, got dtype {values.dtype}")
            raw = values.ravel().astype(np.dtype(f">u{width}")).tobytes()
            return [raw[offset:offset + width] for offset in range(0, len(raw), width)]
        mask = (1 << (width * 8)) - 1
        arrays = []
        for value in values:
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise TypeError(f"Expected integer values, got {type(value).__name__}")
            arrays.append((int(value) & mask).to_bytes(width, "big"))
        return arrays

    @staticmethod
    def _number_bytes(value) -> bytes:
        np = azamcodec.np
        if isinstance(value, np.integer):
            width = value.dtype.itemsize
            if width not in (4, 8):
                raise TypeError(f"Unsupported integer width: {value.dtype}")
            return (int(value) & ((1 << (width * 8)) - 1)).to_bytes(width, "big")
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Value is not a supported number: {type(value).__name__}")
        magnitude = value if value >= 0 else ~value
        return value.to_bytes(magnitude.bit_length() // 8 + 1, "big", signed=True)

    @staticmethod
    def encode_ints(values) -> str:
        return "".join(azamcodec.encode_section(array) for array in azamcodec._fixed_width_arrays(values, 4))

    @staticmethod
    def encode_longs(values) -> str:
        return "".join(azamcodec.encode_section(array) for array in azamcodec._fixed_width_arrays(values, 8))

    @staticmethod
    def encode_numbers(*values) -> str:
        return "".join(azamcodec.encode_section(azamcodec._number_bytes(value)) for value in values)

    @staticmethod
    def _decode_fixed_width(text: str, width: int) -> "list[int]":
        decoded = []
        for start, section in azamcodec._iter_sections(azamcodec._cursor_for(text)):
            if len(section) > width:
                raise ValueOutOfRangeError(len(section), width, start)
            decoded.append(int.from_bytes(section, "big"))
        return decoded

    @staticmethod
    def decode_ints(text: str, signed: bool = False):
        np = azamcodec.np
        values = np.array(azamcodec._decode_fixed_width(text, 4), dtype=np.uint32)
        return values.view(np.int32) if signed else values

    @staticmethod
    def decode_longs(text: str, signed: bool = False):
        np = azamcodec.np
        values = np.array(azamcodec._decode_fixed_width(text, 8), dtype=np.uint64)
        return values.view(np.int64) if signed else values

    @staticmethod
    def decode_numbers(text: str) -> "list[int]":
        return [int.from_bytes(section, "big") for section in azamcodec.decode_all_sections(text)]

    # ------------------------------------------------------------------
    # Streams
    # ------------------------------------------------------------------
    @staticmethod
    def _write_symbols(output, symbols: str) -> None:
        if not symbols:
            return
        if isinstance(output, _io_module.TextIOBase):
            output.write(symbols)
        else:
            output.write(symbols.encode("ascii"))

    @staticmethod
    def encode_stream(output, source, chunk_size: "_typing_module.Optional[int]" = None) -> None:
        """Encode everything readable from ``source`` as one section written to ``output``.

        The input is consumed in ``chunk_size`` blocks. The newest nibble is held back
        until the next block arrives, since only the final nibble is written from the
        low alphabet. Nothing is written unless the whole source reads cleanly.
        """
        size = chunk_size or azamcodec.STREAM_CHUNK_SIZE
        parts = []
        held = ""
        while True:
            chunk = source.read(size)
            if not chunk:
                break
            digits = azamcodec._as_bytes(chunk).hex()
            if held:
                digits = held + digits
            else:
                digits = digits.lstrip("0")
                if not digits:
                    continue
            parts.append(digits[:-1].translate(azamcodec._HIGH_FROM_HEX))
            held = digits[-1]
        parts.append(held or "0")
        azamcodec._write_symbols(output, "".join(parts))

    @staticmethod
    def encode_streams(output, *sources, chunk_size: "_typing_module.Optional[int]" = None) -> None:
        for source in sources:
            if source is None:
                raise TypeError("Stream sources must not be None")
            azamcodec.encode_stream(output, source, chunk_size=chunk_size)

    @staticmethod
    def decode_stream_section(source, output) -> None:
        """Read exactly one section from ``source`` and write its bytes to ``output``."""
        output.write(azamcodec._decode_from(_StreamCursor(source)))

    @staticmethod
    def iter_stream_sections(source):
        cursor = _StreamCursor(source)
        for _, section in azamcodec._iter_sections(cursor):
            yield section


azamcodec.SYMBOLS = azamcodec._build_symbol_table()


def cli(argv=None) -> int:
    import argparse
    import pathlib

    def _cli_config_path() -> pathlib.Path:
        cfg = _os_module.getenv("AZAMCODEC_CLI_CONFIG")
        if cfg:
            return pathlib.Path(cfg).expanduser()
        xdg = _os_module.getenv("XDG_CONFIG_HOME")
        if xdg:
            return pathlib.Path(xdg) / "azamcodec" / "cli.conf"
        appdata = _os_module.getenv("APPDATA")
        if appdata:
            return pathlib.Path(appdata) / "azamcodec" / "cli.conf"
        return pathlib.Path("~/.config/azamcodec/cli.conf").expanduser()

    def _cli_plain_mode() -> bool:
        if _os_module.getenv("AZAMCODEC_CLI_PLAIN"):
            return True
        if _os_module.getenv("NO_COLOR"):
            return True
        style = (_os_module.getenv("AZAMCODEC_CLI_STYLE") or "").strip().lower()
        if style in {"plain", "boring", "0", "false", "off"}:
            return True
        if style in {"color", "emoji", "on"}:
            return False
        cfg_path = _cli_config_path()
        try:
            if cfg_path.exists():
                data = cfg_path.read_text(encoding="utf-8").lower()
                if "plain=1" in data or "plain=true" in data:
                    return True
                if "style=plain" in data or "mode=plain" in data:
                    return True
        except OSError:
            pass
        return False

    class _CliTheme:
        def __init__(self, plain: bool):
            self.plain = plain
            self.reset = "" if plain else "\033[0m"
            self.bold = "" if plain else "\033[1m"
            self.red = "" if plain else "\033[31m"
            self.green = "" if plain else "\033[32m"

        def _wrap(self, msg: str, color: str, emoji: "str | None" = None) -> str:
            if self.plain:
                return msg
            prefix = f"{emoji} " if emoji else ""
            return f"{self.bold}{color}{prefix}{msg}{self.reset}"

        def ok(self, msg: str) -> str:
            return self._wrap(msg, self.green, "✅")

        def err(self, msg: str) -> str:
            return self._wrap(msg, self.red, "❌")

    theme = _CliTheme(_cli_plain_mode())
    if not theme.plain:
        try:
            import colorama
            colorama.just_fix_windows_console()
        except ImportError:
            pass

    def _fail(label: str, exc: Exception) -> int:
        print(theme.err(f"{label} failed: {exc}"), file=_sys_module.stderr)
        return 1

    parser = argparse.ArgumentParser(prog="azamcodec", description="Azam Codec encoder/decoder")
    subparsers = parser.add_subparsers(dest="command", required=True)

    enc = subparsers.add_parser("enc", help="Encode hex byte strings, one section each")
    enc.add_argument("hex", nargs="+", help="Input bytes as hex (e.g. 0100)")

    dec = subparsers.add_parser("dec", help="Decode all sections and print each as hex")
    dec.add_argument("text", help="Encoded string")

    enc_int = subparsers.add_parser("enc-int", help="Encode integers, one section each")
    enc_int.add_argument("numbers", nargs="+", help="Integers (decimal or 0x-prefixed)")
    enc_int.add_argument(
        "--width",
        type=int,
        choices=(0, 32, 64),
        default=0,
        help="Fixed integer width in bits (0 = arbitrary precision)"
    )

    dec_int = subparsers.add_parser("dec-int", help="Decode all sections as integers")
    dec_int.add_argument("text", help="Encoded string")
    dec_int.add_argument(
        "--width",
        type=int,
        choices=(0, 32, 64),
        default=0,
        help="Fixed integer width in bits (0 = arbitrary precision)"
    )
    dec_int.add_argument(
        "--signed",
        action="store_true",
        help="Reinterpret fixed-width values as two's complement"
    )

    file_enc = subparsers.add_parser("file-enc", help="Encode a binary file as one section")
    file_enc.add_argument("input", help="Input file path")
    file_enc.add_argument("output", help="Output file path for the encoded text")

    file_dec = subparsers.add_parser("file-dec", help="Decode a single-section file back to binary")
    file_dec.add_argument("input", help="Input encoded file")
    file_dec.add_argument("output", help="Output binary file path")

    args = parser.parse_args(argv)

    if args.command == "enc":
        try:
            arrays = [bytes.fromhex(value) for value in args.hex]
        except ValueError as exc:
            return _fail("encode", exc)
        print(azamcodec.encode_sections(arrays))
        return 0

    if args.command == "dec":
        try:
            sections = azamcodec.decode_all_sections(args.text.strip())
        except AzamDecodeError as exc:
            return _fail("decode", exc)
        for section in sections:
            print(section.hex())
        return 0

    if args.command == "enc-int":
        try:
            numbers = [int(value, 0) for value in args.numbers]
            if args.width == 32:
                print(azamcodec.encode_ints(numbers))
            elif args.width == 64:
                print(azamcodec.encode_longs(numbers))
            else:
                print(azamcodec.encode_numbers(*numbers))
            return 0
        except (TypeError, ValueError) as exc:
            return _fail("integer encode", exc)

    if args.command == "dec-int":
        try:
            text = args.text.strip()
            if args.width == 32:
                values = azamcodec.decode_ints(text, signed=args.signed).tolist()
            elif args.width == 64:
                values = azamcodec.decode_longs(text, signed=args.signed).tolist()
            else:
                values = azamcodec.decode_numbers(text)
        except AzamDecodeError as exc:
            return _fail("integer decode", exc)
        for value in values:
            print(value)
        return 0

    if args.command == "file-enc":
        try:
            in_path = pathlib.Path(args.input)
            out_path = pathlib.Path(args.output)
            with open(in_path, "rb") as source, open(out_path, "wb") as output:
                azamcodec.encode_stream(output, source)
            print(theme.ok(f"Wrote {out_path}"))
            return 0
        except OSError as exc:
            return _fail("file encode", exc)

    if args.command == "file-dec":
        try:
            in_path = pathlib.Path(args.input)
            out_path = pathlib.Path(args.output)
            cursor = SymbolCursor(in_path.read_text(encoding="ascii").strip())
            data = azamcodec.decode_section(cursor)
            if not cursor.exhausted():
                raise AzamDecodeError("Trailing data after the first section", cursor.position)
            out_path.write_bytes(data)
            print(theme.ok(f"Wrote {out_path}"))
            return 0
        except (OSError, UnicodeDecodeError, AzamDecodeError) as exc:
            return _fail("file decode", exc)

    return 0


def main(argv=None) -> int:
    try:
        return cli(argv)
    except KeyboardInterrupt:
        print("Exiting...")
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
