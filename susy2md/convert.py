import os
import posixpath
import re

from bs4 import BeautifulSoup
import markdownify

from .errors import ConversionError, WriteError
from .models import ensure_safe_name

# GitHub flavoured output: # headings, '-' bullets, pipe tables, [text](url) links
MARKDOWN_CONFIG = {
    "heading_style": "ATX",
    "bullets": "-",
    "code_language": "",
    "escape_underscores": False,
}
# Tags dropped before conversion (never rendered as document text)
REMOVE_TAGS = ["script", "style"]


def localize_images(soup, images):
    """Point <img> src at the local file name the image was saved under"""
    local_names = {image.local_name for image in images}
    for img in soup.find_all("img", src=True):
        src = img["src"]
        name = posixpath.basename(src)
        if name in local_names and src != name:
            img["src"] = name
    return soup


def html2md(html_content, images=None):
    """Convert an HTML page to Markdown, keeping images, tables, lists and code"""
    try:
        soup = BeautifulSoup(html_content, "lxml")
        for tag in REMOVE_TAGS:
            for elem in soup.find_all(tag):
                elem.decompose()
        if images:
            soup = localize_images(soup, images)
        body = soup.find("body") or soup
        md_content = markdownify.markdownify(str(body), **MARKDOWN_CONFIG)
    except Exception as e:
        raise ConversionError(f"HTML to Markdown conversion failed: {e}", stage="convert") from e
    # Clean trailing spaces and collapse runs of blank lines
    md_lines = [line.rstrip() for line in md_content.splitlines()]
    md_content = re.sub(r"\n{3,}", "\n\n", "\n".join(md_lines)).strip()
    return md_content + "\n" if md_content else ""


def convert_to_markdown(html_body, output_title, save_dir=".", images=None):
    """Convert a fetched page body and write it to save_dir/output_title
    :return: Path of the written Markdown file
    """
    if html_body is None:
        raise ValueError("convert_to_markdown() called before the page body was fetched")
    ensure_safe_name(output_title, "output title")
    md_content = html2md(html_body, images)
    md_file_path = os.path.join(save_dir, output_title)
    try:
        with open(md_file_path, "w", encoding="utf-8") as f:
            f.write(md_content)
    except OSError as e:
        raise WriteError(f"MD file save failed: {e}", stage="convert") from e
    print(f"✅ MD file saved successfully: {output_title}")
    return md_file_path
