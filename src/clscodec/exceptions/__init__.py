"""
Custom exception hierarchy for clscodec.

## Exception Hierarchy

```
ClsCodecError (base)
├── NameTooLongError
├── UnencodableNameError
├── HexParseError
│   ├── InvalidHexFormatError
│   └── InvalidHexDigitError
├── IndexOutOfRangeError
├── DecodeError
│   ├── TruncatedInputError
│   ├── BadMagicError
│   ├── InvalidUtf16Error
│   ├── InvalidUtf8Error
│   ├── InvalidNameLengthError
│   ├── EmptySegmentListError
│   └── SegmentCountMismatchError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

## Usage

All custom exceptions inherit from `ClsCodecError`, which provides:

- `user_message`: one line for a person
- `technical_message`: field, value and byte offset, for logs
- `recoverable`: True when different input would succeed
- `recovery_hint`: what to change, or None

### Example: Rejected Name

```python
from clscodec.exceptions import NameTooLongError

try:
    colorset.name.set_str(title)
except NameTooLongError as e:
    print(e.get_full_message())  # name is unchanged
```

### Example: Damaged File

```python
from clscodec import decode
from clscodec.exceptions import DecodeError

try:
    colorset = decode(data)
except DecodeError as e:
    logger.error(e.technical_message)  # includes the byte offset
```

See `clscodec.exceptions.handlers` for utilities to handle these exceptions systematically.
"""

from .base import ClsCodecError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .decode import (
    BadMagicError,
    DecodeError,
    EmptySegmentListError,
    InvalidNameLengthError,
    InvalidUtf8Error,
    InvalidUtf16Error,
    SegmentCountMismatchError,
    TruncatedInputError,
)
from .handlers import ErrorContext, format_error_for_display, wrap_pydantic_error
from .validation import (
    HexParseError,
    IndexOutOfRangeError,
    InvalidHexDigitError,
    InvalidHexFormatError,
    NameTooLongError,
    UnencodableNameError,
)

__all__ = [
    # Base
    "ClsCodecError",
    # Validation
    "NameTooLongError",
    "UnencodableNameError",
    "HexParseError",
    "InvalidHexFormatError",
    "InvalidHexDigitError",
    "IndexOutOfRangeError",
    # Decode
    "DecodeError",
    "TruncatedInputError",
    "BadMagicError",
    "InvalidUtf16Error",
    "InvalidUtf8Error",
    "InvalidNameLengthError",
    "EmptySegmentListError",
    "SegmentCountMismatchError",
    # Config
    "ConfigurationError",
    "ConfigFileInvalidError",
    "ConfigValidationError",
    # Handlers
    "ErrorContext",
    "wrap_pydantic_error",
    "format_error_for_display",
]
