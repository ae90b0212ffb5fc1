"""Provider project generator - cross-ecosystem publishing configuration

Turns a Terraform provider reference such as ``hashicorp/aws@5.42.0`` into
the npm, PyPI, NuGet, Maven and Go publishing configuration of its prebuilt
cdktf bindings, and decides the major version the package is pinned to.

    Returns:
        int: Exit code
"""
import logging
import os
import sys
from typing import Any, Dict, Optional

from args import parse_args
from common.logging_utils import add_file_handler, configure_logging, extra_context, is_debug_enabled
from constants import Constants, ExitCodes, OutputFormats
from errors import ProviderProjectError
from identity.models import NamingConfig
from identity.resolver import PackageIdentityResolver
from publishing.assembler import PublishingConfigAssembler, check_required
from publishing.models import ProjectSettings, PublishingConfig
from publishing.serialization import render
from settings import load_settings, merge_settings
from versioning.major import MajorVersionResolver
from versioning.registries import ReleaseRegistry, create_registry

logger = logging.getLogger(__name__)


def build_project_config(
    settings: ProjectSettings,
    registry: Optional[ReleaseRegistry] = None,
    naming: Optional[NamingConfig] = None,
) -> PublishingConfig:
    """Derive the complete publishing configuration for one provider.

    Required settings are checked before the release registry is queried, so
    a misconfigured build fails without touching the network.

    Args:
        settings: Caller-supplied project settings.
        registry: Release registry backend; defaults to the ``gh`` CLI.
        naming: Organization naming tokens; defaults to the HashiCorp ones.

    Returns:
        PublishingConfig: The assembled configuration.

    Raises:
        InvalidReference, ReservedSuffixConflict, MissingConfiguration
    """
    naming = naming or NamingConfig()
    check_required(settings)
    identity = PackageIdentityResolver(naming).resolve(settings.terraform_provider)
    major_version = MajorVersionResolver(registry).resolve(
        identity.repository, override=settings.force_major_version
    )
    return PublishingConfigAssembler(naming).assemble(identity, major_version, settings)


def _cli_overrides(args) -> Dict[str, Any]:
    return {
        "terraform_provider": getattr(args, "TERRAFORM_PROVIDER", None),
        "cdktf_version": getattr(args, "CDKTF_VERSION", None),
        "constructs_version": getattr(args, "CONSTRUCTS_VERSION", None),
        "jsii_version": getattr(args, "JSII_VERSION", None),
        "min_node_version": getattr(args, "MIN_NODE_VERSION", None),
        "force_major_version": getattr(args, "FORCE_MAJOR_VERSION", None),
    }


def _output_format(args) -> str:
    if getattr(args, "OUTPUT_FORMAT", None):
        return args.OUTPUT_FORMAT
    output = getattr(args, "OUTPUT", None) or ""
    if output.lower().endswith((".yml", ".yaml")):
        return OutputFormats.YAML.value
    return OutputFormats.JSON.value


def _setup_logging(args) -> None:
    # Honor CLI --loglevel by passing it to centralized logger via env
    if getattr(args, "LOG_LEVEL", None):
        os.environ[Constants.ENV_LOG_LEVEL] = str(args.LOG_LEVEL).upper()
    configure_logging()
    if getattr(args, "QUIET", False):
        logging.getLogger().setLevel(logging.ERROR)
    if getattr(args, "LOG_FILE", None):
        add_file_handler(args.LOG_FILE)
        logger.info("Logging to file: %s", args.LOG_FILE)


def main(argv=None) -> int:
    """Main function of the program."""
    args = parse_args(argv)
    _setup_logging(args)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action="main")
        )

    try:
        raw_settings = merge_settings(load_settings(args.CONFIG), _cli_overrides(args))
        settings = ProjectSettings.from_mapping(raw_settings)
        registry = create_registry(args.REGISTRY, timeout=args.REGISTRY_TIMEOUT)
        config = build_project_config(settings, registry=registry)
    except (ProviderProjectError, ValueError) as exc:
        logger.error("%s", exc)
        return ExitCodes.CONFIG_ERROR.value

    output = render(config, _output_format(args))
    if args.OUTPUT:
        try:
            with open(args.OUTPUT, "w", encoding="utf-8") as fh:
                fh.write(output)
        except OSError as exc:
            logger.error("Cannot write %s: %s", args.OUTPUT, exc)
            return ExitCodes.FILE_ERROR.value
        logger.info("Wrote %s configuration to %s", config.npm.name, args.OUTPUT)
    else:
        sys.stdout.write(output)
    return ExitCodes.SUCCESS.value


if __name__ == "__main__":
    sys.exit(main())
