"""
Command line entry point for the ontology delete service.

Loads an ontology into a fresh in-memory store, applies the access records of
a JSON file, runs one delete operation and prints the resulting state.

HOW TO RUN:
From the src directory, run:
    python -m ontology_delete.cli --help
"""

import argparse
import json
import logging
import sys

from framework.config import ServiceConfig
from .deleter import ONTOLOGY_MODIFIED
from .domain import ResourceKind
from .service import OntologyDeleteService


def load_access_records(service: OntologyDeleteService, path: str) -> int:
    """Grant the access records listed in a JSON file.

    The file holds a list of {"identity": ..., "scope": ..., "actions": [...]}.
    The scope "ontologies" stands for the registry of all the ontologies.
    """
    with open(path, "r", encoding="utf-8") as f:
        records = json.load(f)

    for record in records:
        scope = record["scope"]
        if scope == "ontologies":
            scope = service.config.ontologies_registry_uri
        service.permission_store.grant(record["identity"], scope, record.get("actions", ["delete"]))

    return len(records)


def store_report(service: OntologyDeleteService, ontology_uri: str, uri: str = "") -> dict:
    """State of the stores after a run, printed with the response."""
    report = {
        "ontologies": service.ontology_store.ontologies(),
        "datasets": service.registry.datasets(),
    }
    if not ontology_uri:
        return report

    resolved = service.ontology_store.session().resolve(ontology_uri)
    report["modified"] = resolved.handle.get_annotation(ONTOLOGY_MODIFIED) == "true" if resolved.ok else None
    report["dataset"] = service.registry.describe(ontology_uri)
    report["records"] = service.records.count_records(ontology_uri)
    if uri and uri != ontology_uri:
        report["resource_present"] = service.ontology_store.has_entity(ontology_uri, uri)
    return report


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Delete a class, property, named individual or a whole ontology",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Delete a class
  python -m ontology_delete.cli --function deleteClass --ontology-uri http://ex.org/onto \\
      --uri http://ex.org/Foo --ontology-file onto.ttl --access-file access.json --requester 127.0.0.1

  # Delete the whole ontology on behalf of an account of the requester
  python -m ontology_delete.cli --function deleteOntology --ontology-uri http://ex.org/onto \\
      --ontology-file onto.ttl --access-file access.json --requester 127.0.0.1 --registered self::bob
        """
    )

    parser.add_argument(
        "--function",
        required=True,
        help="Operation to run: " + ", ".join(kind.value for kind in ResourceKind)
             + " (or deleteClass, deleteProperty, deleteNamedIndividual, deleteOntology)"
    )
    parser.add_argument("--ontology-uri", default="", help="URI of the ontology")
    parser.add_argument("--uri", default="", help="URI of the class, property or named individual")
    parser.add_argument("--requester", required=True, help="Identity of the requester")
    parser.add_argument("--registered", default="", help="Identity the request is made on behalf of")
    parser.add_argument("--ontology-file", help="Ontology document to load before deleting")
    parser.add_argument("--format", help="rdflib format of the ontology document (guessed if omitted)")
    parser.add_argument("--access-file", help="JSON file with the access records to grant")

    args = parser.parse_args()

    config = ServiceConfig.from_env()
    logging.basicConfig(level=getattr(logging, config.log_level, logging.INFO),
                        format='%(levelname)s: %(message)s')

    service = OntologyDeleteService(config=config)

    if args.ontology_file:
        if not args.ontology_uri:
            parser.error("--ontology-file requires --ontology-uri")
        service.register_ontology(args.ontology_uri, source=args.ontology_file, format=args.format)

    if args.access_file:
        granted = load_access_records(service, args.access_file)
        print(f"Granted {granted} access records")

    outcome = service.process(
        args.function,
        ontology_uri=args.ontology_uri,
        uri=args.uri,
        requester=args.requester,
        registered=args.registered,
    )

    print(json.dumps({
        "stage": outcome.stage.value,
        **outcome.response.to_dict(),
        "store": store_report(service, args.ontology_uri, args.uri),
    }, indent=2))

    return 0 if outcome.ok else 1


if __name__ == "__main__":
    sys.exit(main())
