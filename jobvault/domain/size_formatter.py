from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext


SIZE_UNITS = ('Bytes', 'KB', 'MB', 'GB', 'TB', 'PB', 'EB', 'ZB', 'YB')
_BASE = 1024
_TWO_PLACES = Decimal('0.01')


def _unit_index(byte_count: int) -> int:
    index = 0
    while index < len(SIZE_UNITS) - 1 and byte_count >= _BASE ** (index + 1):
        index += 1
    return index


def _scaled_text(byte_count: int, index: int) -> str:
    # Dividing by 1024**index needs at most 10 * index decimal places, so this
    # precision keeps the quotient exact before the single half-up rounding.
    with localcontext() as ctx:
        ctx.prec = len(str(byte_count)) + 10 * index + 4
        scaled = (Decimal(byte_count) / Decimal(_BASE ** index)).quantize(
            _TWO_PLACES, rounding=ROUND_HALF_UP
        )
    text = format(scaled, 'f')
    return text.rstrip('0').rstrip('.')


def format_size(byte_count: int) -> str:
    """Render a byte count as e.g. ``'1.5 KB'``; values past YB stay in YB."""
    if isinstance(byte_count, bool) or not isinstance(byte_count, int):
        raise ValueError(f'byte count must be an integer: {byte_count!r}')
    if byte_count < 0:
        raise ValueError(f'byte count must not be negative: {byte_count}')
    if byte_count == 0:
        return '0 Bytes'

    index = _unit_index(byte_count)
    return f'{_scaled_text(byte_count, index)} {SIZE_UNITS[index]}'
