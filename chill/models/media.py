from pydantic import BaseModel, ConfigDict, field_validator


class CategoryConfig(BaseModel):
    """
    A named media category loaded from the configuration file.
    Instances are frozen: the category list never changes after startup.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    directory: str = ""  # Left empty when the section has no Directory= line
    file_types: tuple[str, ...] = ()  # Allowed extensions, e.g. (".mp4", ".mkv")

    @field_validator("file_types", mode="before")
    @classmethod
    def normalize_file_types(cls, value):
        # Extensions are matched against lower-cased file suffixes
        return tuple(t.strip().lower() for t in value if t and t.strip())


class MediaFile(BaseModel):
    """
    A single media file found beneath a category directory.
    """
    name: str  # Base filename, used as the link text
    path: str  # Path relative to the category directory (forward slashes)


class MediaGroup(BaseModel):
    """
    The files of one category, as rendered on the listing page.
    """
    directory: str
    files: list[MediaFile]
