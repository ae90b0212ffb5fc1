"""Argument parsing functionality for the provider project generator."""

import argparse

from constants import Constants


def build_parser():
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="provider-project",
        description=(
            "Derive the cross-ecosystem publishing configuration "
            "of a prebuilt Terraform CDK provider"
        ),
        add_help=True,
    )

    parser.add_argument("-p", "--provider",
                        dest="TERRAFORM_PROVIDER",
                        help="Terraform provider reference, i.e: hashicorp/aws@5.42.0",
                        action="store", type=str)
    parser.add_argument("--cdktf-version",
                        dest="CDKTF_VERSION",
                        help="cdktf version constraint, i.e: ^0.20.0",
                        action="store", type=str)
    parser.add_argument("--constructs-version",
                        dest="CONSTRUCTS_VERSION",
                        help="constructs version constraint, i.e: ^10.3.0",
                        action="store", type=str)
    parser.add_argument("--jsii-version",
                        dest="JSII_VERSION",
                        help="Pinned jsii version (optional)",
                        action="store", type=str)
    parser.add_argument("--min-node-version",
                        dest="MIN_NODE_VERSION",
                        help="Minimum node version of the generated package",
                        action="store", type=str)
    parser.add_argument("--force-major-version",
                        dest="FORCE_MAJOR_VERSION",
                        help="Pin the major version instead of querying the release registry",
                        action="store", type=int)

    parser.add_argument("--registry",
                        dest="REGISTRY",
                        help="Release registry backend (default: gh)",
                        action="store", type=str,
                        choices=Constants.SUPPORTED_REGISTRIES,
                        default=Constants.SUPPORTED_REGISTRIES[0])
    parser.add_argument("--registry-timeout",
                        dest="REGISTRY_TIMEOUT",
                        help="Seconds before a release registry query is abandoned",
                        action="store", type=float,
                        default=Constants.REGISTRY_QUERY_TIMEOUT)

    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to settings file (YAML, YML, or JSON)",
                        action="store",
                        type=str)
    parser.add_argument("-o", "--output",
                        dest="OUTPUT",
                        help="Path to output file (default: stdout)",
                        action="store",
                        type=str)
    parser.add_argument("-f", "--format",
                        dest="OUTPUT_FORMAT",
                        help="Output format (json or yaml). If not specified, inferred from --output extension; defaults to json.",
                        action="store",
                        type=str.lower,
                        choices=Constants.SUPPORTED_FORMATS)

    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default='INFO')
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("-q", "--quiet",
                        dest="QUIET",
                        help="Only log errors to the console.",
                        action="store_true")
    return parser


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    return build_parser().parse_args(argv)
