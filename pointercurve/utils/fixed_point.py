# IOFixed: signed 16.16 fixed point as used by the HID driver property tables.
FIXED_ONE = 0x00010000


def float_to_fixed(value: float) -> int:
    return int(round(value * FIXED_ONE))


def fixed_to_float(value: int) -> float:
    return value / FIXED_ONE
