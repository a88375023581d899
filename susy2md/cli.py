import argparse
import os
import re
import sys

from .errors import Susy2mdError
from .scraper import SCRAPE_CONFIG, course_prefix_from_url, run


def validate_url(url):
    """Validate URL legality, must start with http/https"""
    if not re.match(r'^https?://', url, re.IGNORECASE):
        raise argparse.ArgumentTypeError(f"Invalid URL: {url} | Must start with http/https")
    return url


def build_parser():
    parser = argparse.ArgumentParser(
        prog="susy2md",
        description="📄 Course Assignment Scraper | Listing → enunc.html pages → images + Markdown",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog="===== Core Rules =====\n"
               "1. Subpages are the '../../<prefix>/<digits>' links found in the listing page\n"
               "2. Each subpage is <base_url>/<link>/enunc.html, saved as Markdown named after <digits>\n"
               "3. Images are saved next to the Markdown files under their bare file name\n"
               "4. The first failure aborts the whole run (exit status 1)\n"
               "===== Usage Examples =====\n"
               "  1. Default course: susy2md\n"
               "  2. Other course into a folder: susy2md https://susy.ic.unicamp.br:9999/mc102XY mc102"
    )
    parser.add_argument("base_url", nargs='?', type=validate_url, default=SCRAPE_CONFIG["base_url"],
                        help=f"Listing page URL (default: {SCRAPE_CONFIG['base_url']})")
    parser.add_argument("save_folder", nargs='?', default=".",
                        help="Local directory for Markdown and image files (default: current directory)")
    parser.add_argument("--prefix", default=None,
                        help="Course prefix in subdirectory links (default: last path segment of base_url)")
    return parser


def main(argv=None):
    """Main function: Parse CLI args → Discover subpages → Download and convert each one"""
    args = build_parser().parse_args(argv)

    save_dir = args.save_folder
    course_prefix = args.prefix or course_prefix_from_url(args.base_url)

    print("🔧 Config")
    print(f"   ├─ Base URL: {args.base_url}")
    print(f"   ├─ Course Prefix: {course_prefix}")
    print(f"   └─ Local Save Dir: {os.path.abspath(save_dir)}")
    print("-" * 80)
    try:
        subpages = run(args.base_url, course_prefix, save_dir)
    except Susy2mdError as e:
        print(f"\n❌ Scrape aborted: {e.describe()}")
        sys.exit(1)

    print("-" * 80)
    print("🎉 Scrape Task Completed!")
    print(f"📊 Statistics: Total converted {len(subpages)} pages")


if __name__ == "__main__":
    main()
