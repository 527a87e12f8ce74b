"""Entry point for typeahead-textual."""

from typeahead_textual.app import CAR_BRANDS, TypeaheadDemoApp
from typeahead_textual.config import (
    configure_logging,
    load_candidates,
    load_log_file,
    parse_args,
    resolve_candidates_file,
)


def main() -> None:
    """Run the typeahead demo application."""
    args = parse_args()
    configure_logging(args.log_file or load_log_file())
    candidates_file = resolve_candidates_file(cli_file=args.candidates)
    candidates = load_candidates(candidates_file) if candidates_file else CAR_BRANDS
    app = TypeaheadDemoApp(candidates=candidates, debug=args.debug)
    app.run()


if __name__ == "__main__":
    main()
