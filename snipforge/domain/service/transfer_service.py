"""Export/import domain service."""

from collections.abc import Sequence
from datetime import date, datetime, timezone
from typing import Any

import logfire

from snipforge.config import TransferSettings
from snipforge.domain.error import ImportValidationError
from snipforge.domain.model import DEFAULT_LANGUAGE, Snippet, SnippetFields
from snipforge.domain.model.transfer import ExportDocument, ExportedSnippet
from snipforge.domain.value import TagSet
from snipforge.domain.value.tags import filter_by_tags, normalize_tags

from .base import Service


class TransferService(Service):
    """Builds export documents and validates import documents.

    Import validation is fail-fast: the first problem raises
    ImportValidationError naming the offending index and field, and nothing
    is converted unless the whole document is valid.
    """

    def __init__(self, settings: TransferSettings) -> None:
        """Initialize transfer service.

        Args:
            settings: Format version and document size limits
        """
        self.settings = settings

    def export_snippets(
        self,
        snippets: Sequence[Snippet],
        filter_tags: Sequence[str] = (),
        now: datetime | None = None,
    ) -> ExportDocument:
        """Build an export document.

        Args:
            snippets: Snippets to export
            filter_tags: Only export snippets carrying all of these tags
            now: Export time, defaults to the current UTC time

        Returns:
            Export document
        """
        with logfire.span(
            "transfer_service.export_snippets",
            snippet_count=len(snippets),
            filter_tags=list(filter_tags),
        ):
            selected = filter_by_tags(snippets, filter_tags)
            commands = [
                ExportedSnippet(
                    title=snippet.title,
                    body=snippet.body,
                    description=snippet.description or "",
                    tags=list(snippet.tags),
                    language=snippet.language or DEFAULT_LANGUAGE,
                    created_at=snippet.created_at,
                    updated_at=snippet.updated_at,
                )
                for snippet in selected
            ]

            normalized_filter = normalize_tags(filter_tags)
            document = ExportDocument(
                version=self.settings.format_version,
                exported_at=now or datetime.now(timezone.utc),
                total_commands=len(commands),
                commands=commands,
                filter_tags=normalized_filter or None,
            )

            logfire.info(
                "Snippets exported",
                exported=len(commands),
                filtered=bool(normalized_filter),
            )
            return document

    @staticmethod
    def export_filename(filter_tags: Sequence[str] = (), today: date | None = None) -> str:
        """Suggested file name for an export.

        Example: ``snipforge-commands_git-docker_2026-01-31.json``
        """
        day = (today or datetime.now(timezone.utc).date()).isoformat()
        tags = normalize_tags(filter_tags)
        suffix = f"_{'-'.join(tags)}" if tags else ""
        return f"snipforge-commands{suffix}_{day}.json"

    def parse_import(self, data: Any) -> list[SnippetFields]:
        """Validate an import document and convert it to snippet fields.

        Args:
            data: Decoded JSON document

        Returns:
            Fields for each imported snippet, in document order

        Raises:
            ImportValidationError: If any part of the document is invalid
        """
        with logfire.span("transfer_service.parse_import"):
            try:
                self.validate_export_data(data)
            except ImportValidationError as e:
                logfire.warn(
                    "Import rejected", error=str(e), index=e.index, field=e.field
                )
                raise

            fields = [
                SnippetFields(
                    title=command["title"].strip(),
                    body=command["body"].strip(),
                    description=(command.get("description") or "").strip(),
                    tags=TagSet(command.get("tags") or []),
                    language=command.get("language") or DEFAULT_LANGUAGE,
                )
                for command in data["commands"]
            ]
            logfire.info("Import validated", count=len(fields))
            return fields

    def validate_export_data(self, data: Any) -> None:
        """Check an import document against the export format and limits.

        Raises:
            ImportValidationError: On the first problem found
        """
        if not isinstance(data, dict):
            raise ImportValidationError("Invalid export data: not an object")

        version = data.get("version")
        if not version or not isinstance(version, str):
            raise ImportValidationError(
                "Invalid export data: missing version", field="version"
            )

        commands = data.get("commands")
        if not isinstance(commands, list):
            raise ImportValidationError(
                "Invalid export data: missing or invalid commands array",
                field="commands",
            )

        limit = self.settings.max_snippets
        if len(commands) > limit:
            raise ImportValidationError(
                f"Too many commands: {len(commands)} (maximum: {limit})",
                field="commands",
            )

        for index, command in enumerate(commands):
            self._validate_command(index, command)

    def _validate_command(self, index: int, command: Any) -> None:
        """Validate one entry of the commands array."""
        if not isinstance(command, dict):
            raise ImportValidationError(
                f"Invalid command at index {index}: not an object", index=index
            )

        for field in ("title", "body"):
            value = command.get(field)
            if not isinstance(value, str) or not value.strip():
                raise ImportValidationError(
                    f"Invalid command at index {index}: missing or invalid {field}",
                    index=index,
                    field=field,
                )

        tags = command.get("tags")
        if tags is not None:
            if not isinstance(tags, list):
                raise ImportValidationError(
                    f"Invalid command at index {index}: tags must be an array",
                    index=index,
                    field="tags",
                )
            if not all(isinstance(tag, str) for tag in tags):
                raise ImportValidationError(
                    f"Invalid command at index {index}: tags must be an array of strings",
                    index=index,
                    field="tags",
                )

        for field in ("description", "language"):
            value = command.get(field)
            if value is not None and not isinstance(value, str):
                raise ImportValidationError(
                    f"Command at index {index}: {field} must be a string",
                    index=index,
                    field=field,
                )

        limits = (
            ("title", self.settings.max_title_length),
            ("body", self.settings.max_body_length),
            ("description", self.settings.max_description_length),
        )
        for field, limit in limits:
            length = len(command.get(field) or "")
            if length > limit:
                raise ImportValidationError(
                    f"Command at index {index}: {field} too long ({length} > {limit})",
                    index=index,
                    field=field,
                )
