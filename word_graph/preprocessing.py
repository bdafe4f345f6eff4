from __future__ import annotations
import logging
import re
from pathlib import Path
from typing import List, Union

logger = logging.getLogger(__name__)

_NON_ALPHA_RE = re.compile(r"[^A-Za-z]")


def tokenize(text: str) -> List[str]:
    # non-letters become separators; digits and apostrophes split words too
    if not text:
        return []
    return _NON_ALPHA_RE.sub(" ", text).lower().split()


def extract_rtf_text(rtf_content: str) -> str:
    """Extract plain text from RTF content."""
    # Remove RTF control words and groups
    text = re.sub(r'\\[a-z]+\d*', '', rtf_content)
    text = re.sub(r'[{}]', '', text)
    text = re.sub(r'\\\*.*?;', '', text)
    text = re.sub(r'\\[^a-z]', '', text)
    text = re.sub(r'\s+', ' ', text)
    return text.strip()


def extract_markdown_text(md_content: str) -> str:
    """Extract plain text from Markdown content."""
    # code blocks first so their contents don't leak into the graph
    text = re.sub(r'```.*?```', '', md_content, flags=re.DOTALL)
    text = re.sub(r'`([^`]+)`', r'\1', text)
    text = re.sub(r'^#{1,6}\s+', '', text, flags=re.MULTILINE)
    text = re.sub(r'\*{1,2}(.*?)\*{1,2}', r'\1', text)
    text = re.sub(r'_{1,2}(.*?)_{1,2}', r'\1', text)
    # keep link text, drop the target
    text = re.sub(r'\[([^\]]+)\]\([^)]+\)', r'\1', text)
    text = re.sub(r'^-{3,}$', '', text, flags=re.MULTILINE)
    text = re.sub(r'\n\s*\n', '\n\n', text)
    return text.strip()


def load_text_from_bytes(filename: str, data: bytes) -> str:
    """Decode an uploaded document and strip markup based on its extension."""
    extension = filename.lower().rsplit('.', 1)[-1] if '.' in filename else ''
    content = data.decode("utf-8", errors="replace")
    if extension == 'rtf':
        return extract_rtf_text(content)
    if extension == 'md':
        return extract_markdown_text(content)
    return content


def read_text_file(path: Union[str, Path]) -> str:
    path = Path(path)
    logger.info(f"Reading text from {path}")
    return load_text_from_bytes(path.name, path.read_bytes())
