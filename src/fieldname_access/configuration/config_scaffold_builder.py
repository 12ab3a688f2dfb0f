"""Declaration file scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "records.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Record declarations for fieldname-access.
# Replace every <REQUIRED> placeholder before running plan or check.
# Remove <OPTIONAL> entries your records do not need.

records:
  - name: "<REQUIRED>"
    # Read-only union name; the mutable union gets the same name plus "Mut".
    # Defaults to <record name>Field.
    enum_name: "<OPTIONAL>"
    # Capabilities for the read-only union, the mutable union, or both.
    # derive_all replaces derive and derive_mut when present.
    derive:
      - "<OPTIONAL>"
    derive_mut:
      - "<OPTIONAL>"
    # derive_all:
    #   - "<OPTIONAL>"
    fields:
      - name: "<REQUIRED>"
        type: "<REQUIRED>"
        # Gives this field its own variant even when other fields share its type.
        variant_name: "<OPTIONAL>"
    # field_directives:
    #   "<field name>":
    #     variant_name: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML declaration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder declaration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Declaration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
