"""
Contract query classifier - command line entry point.

Usage:
    python main.py train [model_path]   Train on the seed corpus and save
    python main.py -i                   Interactive mode
    python main.py                      Demo over sample queries
"""

import sys

from nlu.classifier import ContractIntentClassifier, get_classifier
from nlu.schemas import DateRangeValue, Diagnostic, FieldList, TextValue
from utils.logger import get_logger

logger = get_logger(__name__)

DEMO_QUERIES = [
    "show contract 123456",
    "shw cntrct 123456",
    "expired contracts",
    "active contracts",
    "boeing contracts",
    "contracts for customer Acme Corp",
    "contracts created by john",
    "when does contract 234567 expire",
    "search contracts containing maintenance",
    "contracts between 2024-01-01 and 2024-12-31",
    "contracts from jan to march 2024",
    "show expiration date and customer name for contract 345678",
    "create contract for account 1234567",
    "how do i create a contract",
    "update contract 456789",
    "",
]


def format_entity(value) -> str:
    if isinstance(value, TextValue):
        return value.value
    if isinstance(value, FieldList):
        return ", ".join(value.values)
    if isinstance(value, DateRangeValue):
        start = value.start.isoformat() if value.start else "..."
        end = value.end.isoformat() if value.end else "..."
        return f"{start} -> {end}"
    if isinstance(value, Diagnostic):
        return f"! {value.message}"
    return str(value)


def print_result(result):
    print(f"  → Intent: {result.intent.value}")
    print(f"  → Confidence: {result.confidence:.2f}")
    print(f"  → Action: {result.action_required}")
    if result.normalized_query and result.normalized_query != result.original_query:
        print(f"  → Normalized: {result.normalized_query}")
    for key, value in result.entities.items():
        print(f"  → {key}: {format_entity(value)}")
    if result.missing_fields:
        print(f"  → Missing: {', '.join(result.missing_fields)}")
    print()


def run_train(path=None):
    classifier = ContractIntentClassifier()
    classifier.train()
    saved = classifier.save(path)
    logger.info(f"Training finished, model at {saved}")


def run_interactive(classifier):
    print("\n=== Interactive Contract Query Classifier ===")
    print("Type a query to classify, or 'exit' to quit.\n")

    while True:
        try:
            query = input("> ").strip()
            if query.lower() in ("exit", "quit", "q"):
                print("Goodbye!")
                break
            if query.lower() == "stats":
                print(classifier.statistics.snapshot().to_dict())
                continue
            if not query:
                continue

            print_result(classifier.classify(query))

        except (KeyboardInterrupt, EOFError):
            print("\nGoodbye!")
            break


def run_demo(classifier):
    print("\n--- Contract Query Classification Demo ---")
    print("Run with -i flag for interactive mode: python main.py -i\n")

    for query in DEMO_QUERIES:
        print(f"'{query}'")
        print_result(classifier.classify(query))

    stats = classifier.statistics.snapshot()
    print(
        f"Processed {stats.total_queries} queries, "
        f"{stats.successful_queries} classified, "
        f"avg {stats.average_time_ms:.2f}ms"
    )


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv

    if argv and argv[0] == "train":
        run_train(argv[1] if len(argv) > 1 else None)
        return

    classifier = get_classifier()
    if argv and argv[0] == "-i":
        run_interactive(classifier)
    else:
        run_demo(classifier)


if __name__ == "__main__":
    main()
