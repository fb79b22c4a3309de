def get_markdown_config():
    """
    Configuration for Python-Markdown rendering of extended markdown.

    The extended syntax is provided by the extended_syntax extension; the
    remaining extensions are stock Python-Markdown ones that pair well with
    it. Extension configs are keyed by the same dotted names used in
    "extensions".
    """
    return {
        "extensions": [
            "marksyntax.markdown.extensions.extended_syntax",
            "fenced_code",
            "tables",
        ],
        "extension_configs": {
            "marksyntax.markdown.extensions.extended_syntax": {
                "equations": True,
                "protocols": True,
                "math": True,
            },
        },
        "output_format": "html",
    }
