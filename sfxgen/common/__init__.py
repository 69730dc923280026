# sfxgen/common - settings shared by the CLI and library entry points.

from sfxgen.common.config import GeneratorConfig, load_settings

__all__ = ["GeneratorConfig", "load_settings"]
