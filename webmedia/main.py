from __future__ import annotations

import argparse
import logging
import os
from datetime import datetime
from typing import List, Optional, Sequence

from dotenv import load_dotenv

from .client import DEFAULT_BASE_URL, Client
from .exceptions import WebmediaError
from .models import Pager, Tag, Video
from .utils.http_client import HttpFetcher, URLFetcher

load_dotenv()


def _env_str(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return None
    return value


def _env_float(name: str) -> float | None:
    value = _env_str(name)
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def _csv_arg(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _date_arg(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}, use YYYY-MM-DD[THH:MM:SS]") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query the webmedia video API.")
    parser.add_argument("--access-token", default=_env_str("WEBMEDIA_ACCESS_TOKEN"), help="API access token")
    parser.add_argument(
        "--base-url",
        default=_env_str("WEBMEDIA_BASE_URL") or DEFAULT_BASE_URL,
        help="API base URL (scheme and host)",
    )
    parser.add_argument("--timeout", type=float, default=_env_float("WEBMEDIA_TIMEOUT") or 10.0, help="HTTP timeout in seconds")
    parser.add_argument("--verbose", action="store_true", help="Log every request")

    action = parser.add_mutually_exclusive_group(required=True)
    action.add_argument("--video", type=int, metavar="ID", help="Show a single video")
    action.add_argument("--tag", type=int, metavar="ID", help="Show a single tag")
    action.add_argument("--list-videos", action="store_true", help="List videos matching the filters below")
    action.add_argument("--list-tags", action="store_true", help="List tags")

    parser.add_argument("--tag-name", help="Exact tag name filter for --list-tags")
    parser.add_argument("--page", type=int, help="Page number for --list-videos")
    parser.add_argument("--per-page", type=int, help="Page size for --list-videos")
    parser.add_argument("--order-by", help="Sort order for --list-videos")
    parser.add_argument("--tags", type=_csv_arg, help="Comma-separated tags every listed video must carry")
    parser.add_argument("--fields", type=_csv_arg, help="Comma-separated fields to request (only=)")
    parser.add_argument("--published-since", type=_date_arg, help="Only videos published at or after this UTC date")
    parser.add_argument("--published-until", type=_date_arg, help="Only videos published at or before this UTC date")
    parser.add_argument("--pager-only", action="store_true", help="With --list-videos, print pagination metadata only")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def print_video(video: Video) -> None:
    logging.info("%-10s | %s", video.id, video.title or "")
    if video.published_at:
        logging.info("    published %s", video.published_at.isoformat())
    if video.tags:
        logging.info("    tags: %s", ", ".join(video.tags))
    if video.extended_metadata and video.extended_metadata.content_rating:
        logging.info("    rating: %s", video.extended_metadata.content_rating)


def print_tags(tags: List[Tag]) -> None:
    if not tags:
        logging.info("No tags found.")
        return
    logging.info("%-10s | %s", "Tag ID", "Name")
    logging.info("%s", "-" * 40)
    for tag in tags:
        logging.info("%-10s | %s", tag.id, tag.name)


def print_pager(pager: Pager) -> None:
    logging.info(
        "Page %s of %s (%s entries, %s per page)",
        pager.current_page,
        pager.total_pages,
        pager.total_entries,
        pager.per_page,
    )


def run(args: argparse.Namespace, fetcher: Optional[URLFetcher] = None) -> int:
    if not args.access_token:
        logging.error("An access token is required (--access-token or WEBMEDIA_ACCESS_TOKEN).")
        return 2

    own_fetcher = None
    if fetcher is None:
        own_fetcher = fetcher = HttpFetcher(timeout=args.timeout)

    try:
        client = Client(args.access_token, base_url=args.base_url, fetcher=fetcher)

        if args.video is not None:
            query = client.video(args.video)
            if args.fields:
                query = query.fields(*args.fields)
            print_video(query.fetch())
        elif args.tag is not None:
            tag = client.tag(args.tag).fetch()
            print_tags([tag])
        elif args.list_tags:
            tags_query = client.tags()
            if args.tag_name:
                tags_query = tags_query.name(args.tag_name)
            print_tags(tags_query.fetch())
        else:
            videos_query = client.videos()
            if args.page is not None:
                videos_query = videos_query.page(args.page)
            if args.per_page is not None:
                videos_query = videos_query.per_page(args.per_page)
            if args.order_by:
                videos_query = videos_query.order_by(args.order_by)
            if args.tags:
                videos_query = videos_query.with_tags(*args.tags)
            if args.fields:
                videos_query = videos_query.fields(*args.fields)
            if args.published_since:
                videos_query = videos_query.published_since(args.published_since)
            if args.published_until:
                videos_query = videos_query.published_until(args.published_until)

            if args.pager_only:
                print_pager(videos_query.pager().fetch())
            else:
                results = videos_query.fetch()
                print_pager(results.pager)
                for video in results.videos:
                    print_video(video)
    except WebmediaError as exc:
        logging.error("%s", exc)
        if exc.hint:
            logging.error("%s", exc.hint)
        return 1
    finally:
        if own_fetcher is not None:
            own_fetcher.close()
    return 0


def main() -> None:
    args = parse_args()
    configure_logging(args.verbose)
    raise SystemExit(run(args))


if __name__ == "__main__":
    main()
