"""
General utility functions.

Value validation, value-or-default coercion, text and encoding conversion,
and filesystem convenience helpers. Each function is independent and, apart
from ``mkdir_sync_recursively``, never raises.
"""

from baseutils.format_validators import is_email, is_number, is_sha2, is_uuid
from baseutils.parsing_utils import base64_decode_lazy, get_json_value
from baseutils.path_utils import (
    create_directory_if_not_exists,
    get_module_root_path,
    is_dir,
    is_file,
    make_module_root_path,
    mkdir_sync_recursively,
)
from baseutils.string_utils import convert_utf8_to_ascii
from baseutils.value_coercion import (
    get_specified_str,
    get_valid_arr,
    get_valid_bool,
    get_valid_int,
    get_valid_int_range,
    get_valid_num,
    get_valid_num_range,
    get_valid_obj,
    get_valid_str,
    get_valid_str_expr,
    get_valid_str_range,
    get_valid_tokens,
)

__version__ = "2.0.0"

__all__ = [
    "base64_decode_lazy",
    "convert_utf8_to_ascii",
    "create_directory_if_not_exists",
    "get_json_value",
    "get_module_root_path",
    "get_specified_str",
    "get_valid_arr",
    "get_valid_bool",
    "get_valid_int",
    "get_valid_int_range",
    "get_valid_num",
    "get_valid_num_range",
    "get_valid_obj",
    "get_valid_str",
    "get_valid_str_expr",
    "get_valid_str_range",
    "get_valid_tokens",
    "is_dir",
    "is_email",
    "is_file",
    "is_number",
    "is_sha2",
    "is_uuid",
    "make_module_root_path",
    "mkdir_sync_recursively",
]
