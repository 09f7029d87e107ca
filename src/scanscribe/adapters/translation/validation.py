"""Delimiting recognized text in prompts and cleaning model output."""

# Unique delimiters for document text boundaries
DOC_BEGIN = "<<<DOCUMENT_TEXT_BEGIN>>>"
DOC_END = "<<<DOCUMENT_TEXT_END>>>"


def wrap_document(text: str) -> str:
    return f"{DOC_BEGIN}\n{text}\n{DOC_END}"


def clean_translation(text: str) -> str:
    """Strip delimiters a model echoed back, and surrounding whitespace."""
    text = text.strip()
    if text.startswith(DOC_BEGIN):
        text = text[len(DOC_BEGIN):]
    if text.endswith(DOC_END):
        text = text[: -len(DOC_END)]
    return text.strip()
