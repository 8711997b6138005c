"""Configuration management for the Figma to XLIFF converter."""

import os
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv

load_dotenv()


@dataclass
class Config:
    """Application configuration."""

    # Locale whose values fill <source>; every other mode becomes a target file
    source_locale: str = field(
        default_factory=lambda: os.getenv("FIGMA2XLIFF_SOURCE_LOCALE", "en")
    )

    # Input base name, without the .json extension
    input_name: str = field(
        default_factory=lambda: os.getenv("FIGMA2XLIFF_INPUT", "Localization")
    )

    # Output settings
    output_dir: str = field(
        default_factory=lambda: os.getenv("FIGMA2XLIFF_OUTPUT_DIR", ".")
    )
    output_name: str = field(
        default_factory=lambda: os.getenv("FIGMA2XLIFF_OUTPUT_NAME", "strings")
    )

    # Output file naming
    output_prefix: str = "translations_"
    output_extension: str = ".xlf"
    input_extension: str = ".json"

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []
        if not self.source_locale.strip():
            errors.append("FIGMA2XLIFF_SOURCE_LOCALE is empty")
        if not self.input_name.strip():
            errors.append("FIGMA2XLIFF_INPUT is empty")
        return errors

    def output_filename(self, locale: str) -> str:
        """File name for the XLIFF document of one locale."""
        return f"{self.output_prefix}{locale}{self.output_extension}"


# Global config instance
config = Config()
