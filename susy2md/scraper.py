import os
import posixpath
import re
from urllib.parse import urlparse, urlunparse

import requests

from .convert import convert_to_markdown
from .errors import FetchError, WriteError
from .models import ImageDescriptor, SubpageDescriptor

# ===================== Configurable Params (Adjust as needed) =====================
SCRAPE_CONFIG = {
    "base_url": "https://susy.ic.unicamp.br:9999/mc202ABC",
    "subpage_file": "enunc.html",  # Assignment statement page inside each subdirectory
    # Relative links from the listing page to each assignment subdirectory
    "subdir_pattern": r"\.\./.\./{prefix}/\d*",
    # Whole <img ...> element, up to the first '>'
    "img_tag_pattern": r"<img [^>]*>",
    # Quoted string whose last char is one of the class [png|jpg|jpeg|gif]
    "img_filename_pattern": r'"[^"]*[png|jpg|jpeg|gif]"',
}
# ==================================================================================


def _get(url, stage):
    """Blocking GET with the client defaults (no timeout, no retry, no custom headers)"""
    try:
        response = requests.get(url)
        response.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(f"Problem while making request to url {url}: {e}", url=url, stage=stage) from e
    return response


def fetch_text(url, stage="fetch"):
    return _get(url, stage).text


def fetch_bytes(url, stage="fetch"):
    return _get(url, stage).content


def find_all(pattern, text):
    """Return every non-overlapping match of pattern in text, left to right"""
    return [match.group(0) for match in re.finditer(pattern, text)]


def extract_image_filename(raw_tag, pattern=SCRAPE_CONFIG["img_filename_pattern"]):
    """Pull the quoted file name out of an <img> tag, quotes stripped
    :return: File name / None (no quoted name ending in an image-like char)
    """
    match = re.search(pattern, raw_tag)
    if not match:
        return None
    return match.group(0).strip('"')


def normalize_url(url):
    """Resolve '.' and '..' path segments the same way the HTTP client does
    Example: https://host/mc202ABC/../../mc202ABC/7/enunc.html → https://host/mc202ABC/7/enunc.html
    """
    parsed = urlparse(url)
    if not parsed.path:
        return url
    path = posixpath.normpath(parsed.path)
    if parsed.path.endswith('/') and not path.endswith('/'):
        path += '/'
    return urlunparse(parsed._replace(path=path))


def course_prefix_from_url(base_url):
    """Last path segment of the listing URL, e.g. https://host/mc202ABC → mc202ABC"""
    return urlparse(base_url).path.rstrip('/').rsplit('/', 1)[-1]


def subdirectory_pattern(course_prefix):
    return SCRAPE_CONFIG["subdir_pattern"].format(prefix=re.escape(course_prefix))


def build_subpages(base_url, listing_html, course_prefix=None, subpage_file=None):
    """Build one SubpageDescriptor per subdirectory link in the listing page
    Document order is kept and repeated links are not deduplicated.
    """
    base_url = base_url.rstrip('/')
    course_prefix = course_prefix or course_prefix_from_url(base_url)
    subpage_file = subpage_file or SCRAPE_CONFIG["subpage_file"]
    link_prefix = f"../../{course_prefix}/"
    subpages = []
    for sub_dir in find_all(subdirectory_pattern(course_prefix), listing_html):
        subpages.append(SubpageDescriptor(
            remote_url=normalize_url(f"{base_url}/{sub_dir}/{subpage_file}"),
            output_title=sub_dir.replace(link_prefix, ""),
        ))
    return subpages


def discover_subpages(base_url, course_prefix=None, subpage_file=None):
    """Fetch the listing page and turn its subdirectory links into subpage descriptors"""
    listing_html = fetch_text(base_url, stage="listing")
    return build_subpages(base_url, listing_html, course_prefix, subpage_file)


def subpage_directory(remote_url, subpage_file=None):
    suffix = "/" + (subpage_file or SCRAPE_CONFIG["subpage_file"])
    if remote_url.endswith(suffix):
        return remote_url[:-len(suffix)]
    return remote_url


def discover_images(directory_url, html_body):
    """Find <img> tags in a fetched page and resolve them against the page directory
    Tags without a usable quoted file name are skipped.
    """
    if html_body is None:
        raise ValueError("discover_images() called before the page body was fetched")
    images = []
    for raw_tag in find_all(SCRAPE_CONFIG["img_tag_pattern"], html_body):
        filename = extract_image_filename(raw_tag)
        if filename is None:
            continue
        images.append(ImageDescriptor(
            remote_url=normalize_url(f"{directory_url}/{filename}"),
            local_name=posixpath.basename(filename),
        ))
    return images


def download_all(images, save_dir="."):
    """Download images one after another into save_dir, overwriting same-named files"""
    for image in images:
        content = fetch_bytes(image.remote_url, stage="image")
        save_path = os.path.join(save_dir, image.local_name)
        print(f"📥 Download image: {image.local_name} (from: {image.remote_url})")
        try:
            with open(save_path, "wb") as f:
                f.write(content)
        except OSError as e:
            raise WriteError(f"Image save failed: {e}", url=image.remote_url, stage="image") from e


def process_subpage(descriptor, save_dir=".", subpage_file=None):
    """Fetch one assignment page, download its images, then convert it to Markdown
    :return: List of ImageDescriptor handled for this page
    """
    print(f"📄 {descriptor}")
    descriptor.html_body = fetch_text(descriptor.remote_url, stage="subpage")
    print(f"✅ Page loaded successfully: {descriptor.remote_url}")

    directory_url = subpage_directory(descriptor.remote_url, subpage_file)
    images = discover_images(directory_url, descriptor.html_body)
    download_all(images, save_dir)
    convert_to_markdown(descriptor.html_body, descriptor.output_title, save_dir, images)

    print(f"🖼️  Images: {images}")
    return images


def ensure_save_dir(save_dir):
    try:
        os.makedirs(save_dir, exist_ok=True)
    except OSError as e:
        raise WriteError(f"Local save directory creation failed: {e}", stage="setup") from e
    return save_dir


def run(base_url=None, course_prefix=None, save_dir=".", subpage_file=None):
    """Whole pipeline: discover subpages, then process each in order
    Stops at the first error, later subpages are never attempted.
    """
    base_url = base_url or SCRAPE_CONFIG["base_url"]
    ensure_save_dir(save_dir)
    subpages = discover_subpages(base_url, course_prefix, subpage_file)
    print(f"🔍 Found {len(subpages)} subpages at {base_url}")
    for descriptor in subpages:
        process_subpage(descriptor, save_dir, subpage_file)
    return subpages
