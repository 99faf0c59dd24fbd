"""Known token values and payload texts."""

# Timestamp at a window boundary (1700000000 % 20 == 0)
WINDOW_START = 1_700_000_000

# derive_token with the defaults (window 20s, modulus 32767)
TOKEN_VECTORS = {
    0: 0,
    19: 0,
    20: 1,
    39: 1,
    40: 2,
    655_339: 32766,  # last window before the modulus wraps
    655_340: 0,  # 32767 * 20
    WINDOW_START: 2402,
    WINDOW_START + 19: 2402,
    WINDOW_START + 20: 2403,
}

PAYLOAD_TEXT = "1700000000,2402"

MALFORMED_PAYLOADS = {
    "empty": "",
    "no_delimiter": "17000000002402",
    "extra_field": "1700000000,2402,1",
    "trailing_delimiter": "1700000000,",
    "leading_space": " 1700000000,2402",
    "trailing_newline": "1700000000,2402\n",
    "negative_token": "1700000000,-5",
    "plus_sign": "+1700000000,2402",
    "hex": "0x10,2402",
    "float": "1700000000.5,2402",
    "arabic_indic_digits": "١٧٠٠,2402",
    "semicolon": "1700000000;2402",
}
