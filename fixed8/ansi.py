"""ANSI terminal colour and style escape sequences."""

from __future__ import annotations

from enum import Enum


class Style(Enum):
    """Escape sequences wrapped in readline's non-printing markers."""

    # Regular text
    BLK = "\001\033[0;30m\002"
    RED = "\001\033[0;31m\002"
    GRN = "\001\033[0;32m\002"
    YEL = "\001\033[0;33m\002"
    BLU = "\001\033[0;34m\002"
    MAG = "\001\033[0;35m\002"
    CYN = "\001\033[0;36m\002"
    WHT = "\001\033[0;37m\002"

    # Bold text
    BBLK = "\001\033[1;30m\002"
    BRED = "\001\033[1;31m\002"
    BGRN = "\001\033[1;32m\002"
    BYEL = "\001\033[1;33m\002"
    BBLU = "\001\033[1;34m\002"
    BMAG = "\001\033[1;35m\002"
    BCYN = "\001\033[1;36m\002"
    BWHT = "\001\033[1;37m\002"

    # Underlined text
    UBLK = "\001\033[4;30m\002"
    URED = "\001\033[4;31m\002"
    UGRN = "\001\033[4;32m\002"
    UYEL = "\001\033[4;33m\002"
    UBLU = "\001\033[4;34m\002"
    UMAG = "\001\033[4;35m\002"
    UCYN = "\001\033[4;36m\002"
    UWHT = "\001\033[4;37m\002"

    # Background
    BLKB = "\001\033[40m\002"
    REDB = "\001\033[41m\002"
    GRNB = "\001\033[42m\002"
    YELB = "\001\033[43m\002"
    BLUB = "\001\033[44m\002"
    MAGB = "\001\033[45m\002"
    CYNB = "\001\033[46m\002"
    WHTB = "\001\033[47m\002"

    # High intensity background
    BLKHB = "\001\033[0;100m\002"
    REDHB = "\001\033[0;101m\002"
    GRNHB = "\001\033[0;102m\002"
    YELHB = "\001\033[0;103m\002"
    BLUHB = "\001\033[0;104m\002"
    MAGHB = "\001\033[0;105m\002"
    CYNHB = "\001\033[0;106m\002"
    WHTHB = "\001\033[0;107m\002"

    # High intensity text
    HBLK = "\001\033[0;90m\002"
    HRED = "\001\033[0;91m\002"
    HGRN = "\001\033[0;92m\002"
    HYEL = "\001\033[0;93m\002"
    HBLU = "\001\033[0;94m\002"
    HMAG = "\001\033[0;95m\002"
    HCYN = "\001\033[0;96m\002"
    HWHT = "\001\033[0;97m\002"

    # Bold high intensity text
    BHBLK = "\001\033[1;90m\002"
    BHRED = "\001\033[1;91m\002"
    BHGRN = "\001\033[1;92m\002"
    BHYEL = "\001\033[1;93m\002"
    BHBLU = "\001\033[1;94m\002"
    BHMAG = "\001\033[1;95m\002"
    BHCYN = "\001\033[1;96m\002"
    BHWHT = "\001\033[1;97m\002"

    # Reset (the later names are aliases of RESET)
    RESET = "\001\033[0m\002"
    CRESET = "\001\033[0m\002"
    COLOR_RESET = "\001\033[0m\002"
    NC = "\001\033[0m\002"

    def __str__(self) -> str:
        return self.value


def paint(text: object, style: Style | str) -> str:
    """Wrap ``text`` in ``style`` followed by a reset sequence.

    ``style`` may be a :class:`Style` member or the name of one.
    """
    if not isinstance(style, Style):
        try:
            style = Style[style]
        except KeyError:
            raise ValueError(f"unknown style: {style!r}") from None
    return f"{style.value}{text}{Style.RESET.value}"