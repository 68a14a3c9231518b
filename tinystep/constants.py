"""Shared constants: versions, URLs and environment variable names."""

VERSION = "0.1.0"

USER_AGENT = f"tinystep/{VERSION}"

# Hosted authorities are looked up at:
#   <HOSTED_API_URL>/v1/teams/<team>/authorities/<authority>
HOSTED_API_URL = "https://api.smallstep.com"
DEFAULT_HOSTED_AUTHORITY = "ssh"

DEFAULT_TIMEOUT = 30.0

ENV_CA_URL = "TINYSTEP_CA_URL"
ENV_CA_BUNDLE = "TINYSTEP_CA_BUNDLE"
ENV_TIMEOUT = "TINYSTEP_TIMEOUT"
