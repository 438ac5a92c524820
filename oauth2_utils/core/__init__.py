from oauth2_utils.core.core_helpers import (
    MissingParameterError,
    basic_auth_header,
    build_url,
    extend,
    get_time_in_seconds,
    to_lower_case_keys,
    validate,
)
from oauth2_utils.core.tokens import (
    JwtSigner,
    compute_jwt_signature_default,
    decode_jwt,
    decode_jwt_header,
    encode_jwt,
    is_jwt_expired,
)

__all__ = [
    "JwtSigner",
    "MissingParameterError",
    "basic_auth_header",
    "build_url",
    "compute_jwt_signature_default",
    "decode_jwt",
    "decode_jwt_header",
    "encode_jwt",
    "extend",
    "get_time_in_seconds",
    "is_jwt_expired",
    "to_lower_case_keys",
    "validate",
]
