"""Caller-facing input models for Sermon Export."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from sermon_export.formatting.ir import SectionName


class ExportDescriptor(BaseModel):
    """Top-level export metadata.

    Attributes:
        title: Sermon title
        verse: Optional scripture text, possibly several lines
        export_date: Pre-formatted date; "today" is used when omitted
        filename: Output filename override, used verbatim
    """

    model_config = ConfigDict(frozen=True)

    title: str
    verse: Optional[str] = None
    export_date: Optional[str] = None
    filename: Optional[str] = None


class PlanData(BaseModel):
    """A sermon plan as stored in JSON plan files.

    Accepts both snake_case and the camelCase keys used by the web app
    (``sermonTitle``, ``sermonVerse``, ``exportDate``).
    """

    model_config = ConfigDict(populate_by_name=True)

    sermon_title: str = Field(alias="sermonTitle")
    sermon_verse: Optional[str] = Field(default=None, alias="sermonVerse")
    introduction: str = ""
    main: str = ""
    conclusion: str = ""
    export_date: Optional[str] = Field(default=None, alias="exportDate")

    def to_descriptor(self, filename: Optional[str] = None) -> ExportDescriptor:
        return ExportDescriptor(
            title=self.sermon_title,
            verse=self.sermon_verse,
            export_date=self.export_date,
            filename=filename,
        )

    def sections(self) -> dict[SectionName, str]:
        """Section texts keyed by section name."""
        return {
            SectionName.INTRODUCTION: self.introduction,
            SectionName.MAIN: self.main,
            SectionName.CONCLUSION: self.conclusion,
        }
