"""Constants shared by the text helpers."""

from __future__ import annotations

# Encoding used when writing text unless the caller passes one
DEFAULT_ENCODING = "utf-8"

# Encoding used when reading text: UTF-8 with a leading byte-order mark dropped
DEFAULT_READ_ENCODING = "utf-8-sig"
