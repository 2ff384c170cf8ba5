import argparse
import sys

from app.config.settings import Settings
from app.generation.models import VARIATION_COUNTS, Failure, Success, Tone
from app.lifecycle.generation_lifecycle import GenerationLifecycle, build_lifecycle
from app.logging.logger import Log


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate ranked YouTube title candidates.")
    parser.add_argument("--topic", help="Core idea of the video.")
    parser.add_argument("--key-points", help="Secrets the video reveals.")
    parser.add_argument("--target-audience", help="Who the video is for.")
    parser.add_argument("--main-takeaway", help="The reveal.")
    parser.add_argument(
        "--count",
        type=int,
        choices=VARIATION_COUNTS,
        help="Number of title variations.",
    )
    parser.add_argument(
        "--tone",
        choices=[t.value for t in Tone],
        help="Growth profile.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: settings -> lifecycle -> one generation attempt -> print."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    lifecycle = build_lifecycle(settings)
    try:
        return _run(lifecycle, args)
    finally:
        lifecycle.close()


def _run(lifecycle: GenerationLifecycle, args: argparse.Namespace) -> int:
    form = lifecycle.form
    if args.topic is not None:
        form.topic = args.topic
    if args.key_points is not None:
        form.key_points = args.key_points
    if args.target_audience is not None:
        form.target_audience = args.target_audience
    if args.main_takeaway is not None:
        form.main_takeaway = args.main_takeaway
    if args.count is not None:
        form.variation_count = args.count
    if args.tone is not None:
        form.tone = Tone(args.tone)

    if not lifecycle.can_generate:
        print("A topic is required.", file=sys.stderr)
        return 2

    outcome = lifecycle.generate()
    if isinstance(outcome, Success):
        for index, candidate in enumerate(outcome.titles):
            print(f"{candidate.display_rank(index)}. {candidate.youtube_title}")
            if candidate.thumbnail_text:
                print(f"   THUMBNAIL: {candidate.thumbnail_text}")
            if candidate.ctr_rationale:
                print(f"   WHY IT WORKS: {candidate.ctr_rationale}")
        return 0
    if isinstance(outcome, Failure):
        print(outcome.error.message, file=sys.stderr)
        return 1
    print(outcome.text if outcome is not None else "")
    return 0


if __name__ == "__main__":
    sys.exit(main())
