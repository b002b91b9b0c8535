"""
Keyboard walks across common physical layouts

Each entry is matched forwards and backwards, so only one direction is listed.
"""

QWERTY_PATTERNS = (
    # Full rows
    'qwertyuiop', 'asdfghjkl', 'zxcvbnm',
    # Typing runs
    'qwert', 'werty', 'asdfg', 'sdfgh', 'zxcvb', 'xcvbn',
    # Short runs
    'qwe', 'asd', 'zxc', 'rty', 'fgh', 'cvb', 'poi', 'lkj', 'mnb',
    # Columns, top to bottom
    '1qaz', '2wsx', '3edc', '4rfv', '5tgb', '6yhn', '7ujm', '8ik', '9ol', '0p',
    # Diagonals
    'qaz', 'wsx', 'edc', 'zaq', 'xsw', 'cde',
)

AZERTY_PATTERNS = (
    'azertyuiop', 'qsdfghjklm', 'wxcvbn',
    'azert', 'zerty', 'qsdfg', 'wxcvb',
    'aze', 'qsd', 'wxc',
)

QWERTZ_PATTERNS = (
    'qwertzuiop', 'yxcvbnm',
    'qwertz', 'yxcvb',
    'yxc',
)

DVORAK_PATTERNS = (
    'pyfgcrl', 'aoeuidhtns', 'qjkxbmwvz',
    'aoeu', 'htns', 'qjkx',
)

COLEMAK_PATTERNS = (
    'qwfpgjluy', 'arstdhneio', 'zxcvbkm',
    'arst', 'dhne', 'zxcv',
)

CYRILLIC_PATTERNS = (
    'йцукенгшщзхъ', 'фывапролджэ', 'ячсмитьбю',
    'йцукен', 'цукен', 'фывап', 'ячсми', 'ыва',
)

NUMERIC_PATTERNS = (
    # Number row
    '1234567890',
    # Keypad rows
    '789', '456', '123',
    # Keypad columns
    '741', '852', '963', '7410', '8520', '9630',
    # Keypad diagonals
    '753', '951',
)

KEYBOARD_PATTERNS = (
    QWERTY_PATTERNS
    + AZERTY_PATTERNS
    + QWERTZ_PATTERNS
    + DVORAK_PATTERNS
    + COLEMAK_PATTERNS
    + CYRILLIC_PATTERNS
    + NUMERIC_PATTERNS
)
