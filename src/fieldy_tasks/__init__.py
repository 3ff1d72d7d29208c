import argparse
import asyncio
import json
import re
import sys
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from .config import LOG_LEVELS, config
from .data import (
    CATEGORY_KEYWORDS,
    FILLER_WORDS,
    GAP,
    QUICK_LENGTH_LIMIT,
    TRAILING_CONJUNCTIONS,
    TRIGGER_GROUPS,
    WHITESPACE,
)
from .payload import ExtractionResponse, WebhookPayload

MIN_TASK_LENGTH = 5
MAX_TASK_LENGTH = 100
DEFAULT_CONFIDENCE = 0.8

# Case folding stays within ASCII, so "\u017f" never stands in for "s".
PATTERN_FLAGS = re.IGNORECASE | re.ASCII

_FILLER_RE = re.compile("^(?:" + "|".join(FILLER_WORDS) + ")" + GAP + "+", PATTERN_FLAGS)
_TRAILING_CONJUNCTION_RE = re.compile(GAP + "+(?:" + "|".join(TRAILING_CONJUNCTIONS) + r")\Z", PATTERN_FLAGS)

logger.disable(__name__)


class Category(str, Enum):
    """Expected effort of a task."""

    QUICK = "quick"
    DEEP = "deep"
    IDEA = "idea"


@dataclass(frozen=True)
class TaskCandidate:
    text: str
    category: Category
    confidence: float = DEFAULT_CONFIDENCE

    def to_dict(self) -> dict:
        return {"text": self.text, "category": self.category.value, "confidence": self.confidence}


@dataclass(frozen=True)
class TriggerPattern:
    """A group of trigger phrases and the rule for capturing the task spoken after them."""

    name: str
    phrases: tuple[str, ...]
    separator: str = GAP + "+"
    regex: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        triggers = "|".join(re.escape(phrase) for phrase in self.phrases)
        span = rf"([^.!?]{{{MIN_TASK_LENGTH},{MAX_TASK_LENGTH}}})"
        object.__setattr__(self, "regex", re.compile(f"(?:{triggers}){self.separator}{span}", PATTERN_FLAGS))

    def captures(self, text: str) -> Iterator[str]:
        """Yield the trimmed span after every non-overlapping trigger match, up to the first . ! or ?"""
        for match in self.regex.finditer(text):
            yield match.group(1).strip(WHITESPACE)


def clean_task_text(text: str) -> str:
    """Drop one leading filler word, capitalize, and drop one trailing conjunction."""
    text = _FILLER_RE.sub("", text.strip(WHITESPACE), count=1)
    text = text[:1].upper() + text[1:]
    text = _TRAILING_CONJUNCTION_RE.sub("", text, count=1)
    return text.strip(WHITESPACE)


class TaskClassifier:
    category_keywords = CATEGORY_KEYWORDS
    quick_length_limit = QUICK_LENGTH_LIMIT

    def __init__(self):
        self._keywords = [(Category(name), tuple(keywords)) for name, keywords in self.category_keywords]

    def classify(self, phrase: str) -> Category:
        """
        classify a task phrase by expected effort.

        priority:
        1. phrase contains an idea keyword -> idea
        2. phrase contains a deep keyword -> deep
        3. phrase contains a quick keyword -> quick
        4. default -> quick when shorter than 30 characters, else deep
        """
        if not isinstance(phrase, str):
            phrase = ""

        text = phrase.lower()
        for category, keywords in self._keywords:
            if any(keyword in text for keyword in keywords):
                return category

        return Category.QUICK if len(phrase) < self.quick_length_limit else Category.DEEP


class TaskExtractor:
    trigger_groups = TRIGGER_GROUPS

    def __init__(self, classifier: TaskClassifier | None = None):
        self.classifier = classifier or TaskClassifier()
        self.patterns = [
            TriggerPattern(name, tuple(phrases), separator) for name, phrases, separator in self.trigger_groups
        ]

    def phrases(self, transcription: str) -> Iterator[str]:
        """Cleaned task phrases in discovery order (trigger group, then position), duplicates included."""
        for pattern in self.patterns:
            for capture in pattern.captures(transcription):
                cleaned = clean_task_text(capture)
                if len(cleaned) >= MIN_TASK_LENGTH:
                    yield cleaned

    def extract(self, transcription: str | None) -> list[TaskCandidate]:
        """Extract classified, deduplicated tasks. Anything but a non-empty string yields no tasks."""
        if not isinstance(transcription, str) or not transcription:
            return []

        seen: set[str] = set()
        tasks: list[TaskCandidate] = []
        for phrase in self.phrases(transcription):
            normalized = phrase.lower().strip(WHITESPACE)
            if normalized in seen:
                continue
            seen.add(normalized)
            tasks.append(TaskCandidate(text=phrase, category=self.classifier.classify(phrase)))

        logger.debug(f"Extracted {len(tasks)} tasks from {len(transcription)} characters of transcription")
        return tasks


task_extractor = TaskExtractor()


def extract_tasks(transcription: str | None) -> list[TaskCandidate]:
    return task_extractor.extract(transcription)


def classify(phrase: str) -> Category:
    return task_extractor.classifier.classify(phrase)


def extract_payload(payload: WebhookPayload) -> ExtractionResponse:
    """Run extraction over a webhook payload and build the receiver's JSON response."""
    tasks = extract_tasks(payload.transcription)
    logger.info(f"Extracted {len(tasks)} tasks from payload dated {payload.date}")
    return ExtractionResponse.from_tasks(tasks)


def _render(tasks: list[dict], output_format: str) -> str:
    if output_format == "text":
        return "\n".join(f"[{task['category']}] {task['text']}" for task in tasks)
    return json.dumps(tasks, indent=config.json_indent)


def _print_tasks(tasks: list[TaskCandidate]) -> None:
    output = _render([task.to_dict() for task in tasks], config.output_format)
    if output:
        print(output)


def _load_payload(source: str) -> WebhookPayload:
    raw = sys.stdin.read() if source == "-" else Path(source).read_text()
    return WebhookPayload.model_validate_json(raw)


async def _run_interactive_mode() -> None:
    """Extract tasks from every line typed on stdin until EOF."""
    logger.info("Interactive mode: one transcription per line, Ctrl-D to exit")

    while True:
        try:
            line = await asyncio.to_thread(input, config.prompt)
        except (EOFError, KeyboardInterrupt):
            logger.info("Exiting interactive mode")
            return

        transcription = line.strip()
        if not transcription:
            continue

        _print_tasks(extract_tasks(transcription))


def _configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Fieldy Tasks - Extract actionable tasks from speech transcriptions")
    parser.add_argument(
        "transcription",
        nargs="?",
        default=None,
        help="Transcription text. Read from stdin when no other source is given.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--file",
        type=str,
        default=None,
        help="Read the transcription from a plain text file.",
    )
    source.add_argument(
        "--payload",
        type=str,
        default=None,
        help="Read a Fieldy webhook payload (JSON) from a file, or '-' for stdin.",
    )
    source.add_argument(
        "--interactive",
        action="store_true",
        help="Extract tasks from each line typed on stdin.",
    )
    parser.add_argument(
        "--format",
        choices=["json", "text"],
        default=None,
        help="Output format. Overrides config file and env var.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Log level (e.g., 'DEBUG', 'INFO'). Overrides config file and env var.",
    )

    args = parser.parse_args(argv)

    if args.transcription is not None and (args.file or args.payload or args.interactive):
        parser.error("Pass transcription text or one of --file, --payload, --interactive, not both")

    if args.format:
        config.output_format = args.format

    if args.log_level:
        config.log_level = args.log_level

    logger.enable(__name__)
    _configure_logging(config.log_level)

    if args.interactive:
        asyncio.run(_run_interactive_mode())
        return 0

    if args.payload:
        if args.payload != "-" and not Path(args.payload).is_file():
            parser.error(f"Payload file does not exist: {args.payload}")
        try:
            payload = _load_payload(args.payload)
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            logger.error(f"Could not read payload {args.payload}: {e}")
            return 1

        response = extract_payload(payload)
        if config.output_format == "json":
            print(response.model_dump_json(by_alias=True, indent=config.json_indent))
        else:
            output = _render([task.model_dump() for task in response.tasks], "text")
            if output:
                print(output)
        return 0

    if args.file:
        path = Path(args.file)
        if not path.is_file():
            parser.error(f"Transcription file does not exist: {path}")
        try:
            transcription = path.read_text()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Could not read transcription {path}: {e}")
            return 1
    elif args.transcription is not None:
        transcription = args.transcription
    else:
        transcription = sys.stdin.read()

    _print_tasks(extract_tasks(transcription))
    return 0
