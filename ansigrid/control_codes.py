from enum import IntEnum


class ControlCode(IntEnum):
    # C0 bytes the tokenizer treats specially
    NUL = 0x00
    LF = 0x0A
    CR = 0x0D
    SUB = 0x1A  # MS-DOS end-of-file marker
    ESC = 0x1B
    SP = 0x20


class CsiByte(IntEnum):
    """Bytes that may appear inside a CSI body before the command byte."""

    SPACE = 0x20
    SEPARATOR = 0x3B  # ;
    PRIVATE = 0x3F  # ?
    INTRODUCER = 0x5B  # [


class CsiCommand(IntEnum):
    """CSI final bytes handled by the decoder."""

    CUU = ord("A")  # cursor up
    CUD = ord("B")  # cursor down
    CUF = ord("C")  # cursor forward
    CUB = ord("D")  # cursor back
    CNL = ord("E")  # cursor next line
    CPL = ord("F")  # cursor previous line
    CHA = ord("G")  # cursor horizontal absolute
    CUP = ord("H")  # cursor position
    HVP = ord("f")  # horizontal vertical position, same as CUP
    ED = ord("J")  # erase in display
    EL = ord("K")  # erase in line
    SGR = ord("m")  # select graphic rendition
    SCP = ord("s")  # save cursor position
    RCP = ord("u")  # restore cursor position


class SgrCode(IntEnum):
    RESET = 0
    BOLD = 1
    UNDERLINE = 4
    INVERSE = 7
    NOT_BOLD = 21
    NOT_BOLD_FAINT = 22
    NOT_UNDERLINE = 24
    NOT_INVERSE = 27
    FG_FIRST = 30
    FG_LAST = 37
    SET_FG = 38
    DEFAULT_FG = 39
    BG_FIRST = 40
    BG_LAST = 47
    SET_BG = 48
    DEFAULT_BG = 49
    BRIGHT_FG_FIRST = 90
    BRIGHT_FG_LAST = 97
    BRIGHT_BG_FIRST = 100
    BRIGHT_BG_LAST = 107


class ExtendedColorMode(IntEnum):
    """Selector following SGR 38/48."""

    TRUECOLOR = 2
    INDEXED = 5
