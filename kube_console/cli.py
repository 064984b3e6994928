import argparse
import logging

from kube_console.containers import convert_pod
from kube_console.loader import load_volumes
from kube_console.model import load_json
from kube_console.output import output_result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert Kubernetes Pod containers to the console shape"
    )

    parser.add_argument("--pod", required=True, help="Path to Pod JSON")
    parser.add_argument(
        "--volumes",
        help="Path to a volume descriptor file (JSON or YAML). "
        "Defaults to the Pod's own spec.volumes",
    )

    parser.add_argument(
        "--format",
        choices=["text", "json", "yaml"],
        default="text",
        help="Output format (text, json, yaml)",
    )
    parser.add_argument(
        "--no-init-containers",
        action="store_true",
        help="Leave init containers out of the output",
    )
    parser.add_argument("--verbose", action="store_true")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    pod = load_json(args.pod)
    volumes = load_volumes(args.volumes) if args.volumes else None

    result = convert_pod(pod, volumes)
    if args.no_init_containers:
        result["initContainers"] = []

    output_result(result, args.format)


if __name__ == "__main__":
    main()
