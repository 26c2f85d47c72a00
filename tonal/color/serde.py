"""Support for serializing and deserializing ARGB colors in hex notation"""
from typing import Literal, NoReturn, overload

from .conversion import alpha_from_argb, is_opaque
from .spec import Argb


@overload
def _check(
    is_valid: Literal[False], entity: str, value: object, deficiency: str = ...
) -> NoReturn:
    ...
@overload
def _check(
    is_valid: bool, entity: str, value: object, deficiency: str = ...
) -> None | NoReturn:
    ...
def _check(
    is_valid: bool, entity: str, value: object, deficiency: str = 'is malformed'
) -> None | NoReturn:
    if not is_valid:
        raise SyntaxError(f'{entity} "{value}" {deficiency}')
    return


def parse_hex(color: str) -> Argb:
    """
    Parse the string specifying a color in hashed hexadecimal format.

    The string may have 3 or 6 digits for an opaque color or 8 digits for a
    color with alpha channel, which comes first.
    """
    entity = 'hex color'

    _check(color.startswith('#'), entity, color, 'does not start with "#"')
    digits = color[1:]
    _check(len(digits) in (3, 6, 8), entity, color, 'does not have 3, 6, or 8 digits')
    _check(
        all(d in '0123456789abcdefABCDEF' for d in digits),
        entity, color, 'has non-hexadecimal digits',
    )

    if len(digits) == 3:
        digits = ''.join(f'{d}{d}' for d in digits)
    if len(digits) == 6:
        digits = f'ff{digits}'
    return int(digits, base=16)


def to_hex(argb: Argb) -> str:
    """
    Format the ARGB color in hashed hexadecimal format. The alpha channel is
    included only if the color is not opaque.
    """
    if is_opaque(argb):
        return f'#{argb & 0xFFFFFF:06x}'
    return f'#{alpha_from_argb(argb):02x}{argb & 0xFFFFFF:06x}'
