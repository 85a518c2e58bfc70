"""Media type identifiers.

A media type is any string token such as ``"text/plain"``. Tokens are compared
by exact equality only; ``"text/*"`` does not match ``"text/html"``.
"""

MediaType = str

TEXT_PLAIN: MediaType = "text/plain"
TEXT_HTML: MediaType = "text/html"
