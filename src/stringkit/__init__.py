"""String transformation utilities."""

import logging
from pathlib import Path

from .buffers import (
    STACKALLOC_THRESHOLD,
    CharBuffer,
    CharBufferPool,
    configure_shared_pool,
    scratch_buffer,
    shared_pool,
)
from .casing import (
    to_lower_first,
    to_lower_invariant,
    to_lower_ordinal,
    to_snake_case_from_pascal,
    to_title_case_by_spaces,
    to_upper_first,
    to_upper_invariant,
    to_upper_ordinal,
)
from .comparison import (
    StringComparison,
    contains_any,
    contains_any_char,
    ends_with_any,
    ends_with_ignore_case,
    equals_any,
    equals_ignore_case,
    starts_with_any,
    starts_with_ignore_case,
)
from .config import Config, load_config
from .culture import EN_US_CULTURE, INVARIANT_CULTURE, CultureInfo
from .encoding import to_bytes, to_bytes_from_base64, to_memory_stream, to_string_from_base64
from .enums import to_enum, try_to_enum
from .errors import (
    GuidFormatError,
    InvalidFormatError,
    InvalidInputError,
    MissingValueError,
    PhoneNumberFormatError,
    StringKitError,
)
from .escaping import escape_for_template_injection, escape_for_url, slugify, unescape_for_url
from .files import to_file_extension, to_file_name_from_uri
from .filtering import (
    remove_all_char,
    remove_dashes,
    remove_first_crlf,
    remove_leading_char,
    remove_non_digits,
    remove_trailing_char,
    remove_whitespace,
    replace_periods_with_dashes,
    replace_whitespace_with_dashes,
    to_short_zip_code,
    trim_with_custom_character_set,
    truncate,
)
from .guards import (
    has_content,
    is_empty,
    is_null_or_empty,
    is_null_or_whitespace,
    is_whitespace,
    throw_if_null_or_empty,
    throw_if_null_or_whitespace,
)
from .guids import (
    is_valid_guid,
    is_valid_nullable_guid,
    is_valid_populated_guid,
    is_valid_populated_nullable_guid,
    to_int_from_guid,
)
from .identifiers import (
    add_document_suffix,
    add_partition_prefix,
    from_comma_separated_to_list,
    split_composite_id,
    to_ids,
)
from .logging_setup import initialize_logging
from .masking import mask, secure_shuffle, shuffle
from .numerics import (
    is_alpha_numeric,
    is_numeric,
    to_bool,
    to_date_time,
    to_decimal,
    to_double,
    to_int,
    to_utc_date_time,
)
from .phone import (
    sanitize_phone_number,
    to_display_phone_number,
    to_mail_to_format,
    to_sms_format,
    to_tel_format,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())


def configure(config_path: Path | None = None, *, cwd: Path | None = None) -> Config:
    """Load configuration once at startup, set up logging and size the shared pool."""
    config = load_config(config_path, cwd=cwd)
    initialize_logging(config)
    configure_shared_pool(config.buffers)
    return config


__all__ = [
    "__version__",
    "CharBuffer",
    "CharBufferPool",
    "Config",
    "CultureInfo",
    "EN_US_CULTURE",
    "GuidFormatError",
    "INVARIANT_CULTURE",
    "InvalidFormatError",
    "InvalidInputError",
    "MissingValueError",
    "PhoneNumberFormatError",
    "STACKALLOC_THRESHOLD",
    "StringComparison",
    "StringKitError",
    "add_document_suffix",
    "add_partition_prefix",
    "configure",
    "configure_shared_pool",
    "contains_any",
    "contains_any_char",
    "ends_with_any",
    "ends_with_ignore_case",
    "equals_any",
    "equals_ignore_case",
    "escape_for_template_injection",
    "escape_for_url",
    "from_comma_separated_to_list",
    "has_content",
    "initialize_logging",
    "is_alpha_numeric",
    "is_empty",
    "is_null_or_empty",
    "is_null_or_whitespace",
    "is_numeric",
    "is_valid_guid",
    "is_valid_nullable_guid",
    "is_valid_populated_guid",
    "is_valid_populated_nullable_guid",
    "is_whitespace",
    "load_config",
    "mask",
    "remove_all_char",
    "remove_dashes",
    "remove_first_crlf",
    "remove_leading_char",
    "remove_non_digits",
    "remove_trailing_char",
    "remove_whitespace",
    "replace_periods_with_dashes",
    "replace_whitespace_with_dashes",
    "sanitize_phone_number",
    "scratch_buffer",
    "secure_shuffle",
    "shared_pool",
    "shuffle",
    "slugify",
    "split_composite_id",
    "starts_with_any",
    "starts_with_ignore_case",
    "throw_if_null_or_empty",
    "throw_if_null_or_whitespace",
    "to_bool",
    "to_bytes",
    "to_bytes_from_base64",
    "to_date_time",
    "to_decimal",
    "to_display_phone_number",
    "to_double",
    "to_enum",
    "to_file_extension",
    "to_file_name_from_uri",
    "to_ids",
    "to_int",
    "to_int_from_guid",
    "to_lower_first",
    "to_lower_invariant",
    "to_lower_ordinal",
    "to_mail_to_format",
    "to_memory_stream",
    "to_short_zip_code",
    "to_sms_format",
    "to_snake_case_from_pascal",
    "to_string_from_base64",
    "to_tel_format",
    "to_title_case_by_spaces",
    "to_upper_first",
    "to_upper_invariant",
    "to_upper_ordinal",
    "to_utc_date_time",
    "trim_with_custom_character_set",
    "truncate",
    "try_to_enum",
    "unescape_for_url",
]
__version__ = "0.1.0"
