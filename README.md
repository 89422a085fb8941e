# inventory-utils

Parse and validate EAN-13 barcodes and their subset, UPC-A.

## Installation

```
pip install inventory-utils
```

## Usage

Everything lives in the `inventory_utils.ean13` module:

```python
from inventory_utils.ean13 import Ean13, Ean13Error, calculate_check_digit

code = Ean13.from_str("0010576000465")
code.to_json()       # "0010576000465"
str(code)            # "EAN-13(0010576000465)"
repr(code)           # "Ean13(0010576000465)"

# 12-digit codes are treated as UPC-A; the implied leading 0 is added.
upca = Ean13.from_str("010576000465")
upca == code         # True
upca.is_upca()       # True
upca.as_tuple()      # (0, 0, 1, 0, 5, 7, 6, 0, 0, 0, 4, 6, 5)

# Invalid input raises Ean13Error, which tells you what went wrong.
try:
    Ean13.from_str("010576000466")
except Ean13Error as err:
    print(err)       # InvalidCheckDigit
    print(err.kind)  # InvalidCheckDigit

# Compute a check digit from the first twelve digits.
calculate_check_digit([0, 0, 4, 1, 3, 0, 3, 0, 1, 5, 0, 7])   # 0
```

`Ean13` is a frozen, hashable value. It can also be built directly from a
sequence of 13 digits, for example `Ean13((0, 0, 1, 0, 5, 7, 6, 0, 0, 0, 4, 6, 5))`.
Those digits are checked in the same way as a parsed string.

`calculate_check_digit` raises `ValueError` unless it is given exactly 12 digits.

### Repairing malformed codes

`Ean13.from_str_nonstrict` cleans up the input before it builds the code:

- it drops characters that are not digits;
- it pads short codes with leading zeros;
- it trims surplus leading zeros;
- it recomputes the check digit.

```python
Ean13.from_str_nonstrict("a761458256240")      # same as Ean13.from_str("0761458256240")
Ean13.from_str_nonstrict("1234565")            # 0000001234565
Ean13.from_str_nonstrict("00000000001234565")  # 0000001234565
Ean13.from_str_nonstrict("0000001234566")      # check digit fixed to ...565
Ean13.from_str_nonstrict("12345678901234")     # raises Ean13Error (InvalidLength)
```

Be careful: almost any string becomes a valid-looking code this way.
`"absolute nonsense"` turns into `0000000000000`. Use `from_str`
whenever you can.

### JSON

A code is stored in JSON as its 13-digit string:

```python
import json

json.dumps({"upc": code.to_json()})      # '{"upc": "0010576000465"}'
Ean13.from_json("010576000465") == code  # True
```

`from_json` raises `TypeError` if its argument is not a string. If the string
is not a valid code, it raises `Ean13Error` in the same way as `from_str`.

## Errors

`Ean13Error` is a `ValueError`. Its `kind` says why the code was rejected:

| `kind`              | Constant                        | Meaning                                   |
|---------------------|---------------------------------|-------------------------------------------|
| `InvalidLength`     | `Ean13Error.INVALID_LENGTH`     | The code does not have 12 or 13 digits    |
| `InvalidDigit`      | `Ean13Error.INVALID_DIGIT`      | A character is not one of `0`–`9`         |
| `InvalidCheckDigit` | `Ean13Error.INVALID_CHECK_DIGIT`| The check digit is wrong                  |

Two errors compare equal when their `kind` is the same.

## What this package does not do

This package only works with codes as text and digits. It does not draw
barcode images, it does not decode scans or images, and it has no
command-line tool.