import argparse
import json
import logging
import sys

from citations import CitationFormatter, extract_all_url_citations
from config import Configuration

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


def run_citation_flow(
    message: dict,
    markdown: bool = False,
    configuration: Configuration | None = None,
) -> str:
    """Normalize the citations of one message and render them as JSON or markdown."""
    citations = extract_all_url_citations(message)
    if markdown:
        formatter = CitationFormatter.from_configuration(configuration)
        return formatter.format_sources_section(citations)
    return json.dumps([c.to_dict() for c in citations], ensure_ascii=False, indent=2)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Print the normalized citations of a message JSON document."
    )
    parser.add_argument("path", nargs="?", help="message JSON file (default: stdin)")
    parser.add_argument("--markdown", action="store_true", help="render a sources block")
    parser.add_argument("--config", help="yaml file with a `citations` section")
    args = parser.parse_args(argv)

    try:
        if args.path:
            with open(args.path, "r", encoding="utf-8") as f:
                message = json.load(f)
        else:
            message = json.load(sys.stdin)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Could not read message: {e}")
        return 1

    configuration = (
        Configuration.from_yaml(args.config) if args.config else Configuration.from_env()
    )
    print(run_citation_flow(message, markdown=args.markdown, configuration=configuration))
    return 0


if __name__ == "__main__":
    sys.exit(main())
