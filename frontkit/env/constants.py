"""
Shared constants for rendering code.
"""

# 1x1 transparent PNG. Use as an image fallback so a failed image load keeps
# its layout box instead of collapsing.
EMPTY_BASE64_IMAGE = (
    "data:image/png;base64,"
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)
