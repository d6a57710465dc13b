from pydantic import BaseModel, field_validator


class SpanAnnotation(BaseModel):
    start: int
    end: int
    type: str
    data: dict = {}

    model_config = {"frozen": True}

    @field_validator("data", mode="before")
    @classmethod
    def _none_to_dict(cls, value):
        return value or {}


class RichTextSpan(BaseModel):
    """One node of a Prismic structured-text field (paragraph, heading, list item...)."""

    type: str = "paragraph"
    text: str = ""
    spans: list[SpanAnnotation] = []

    # image / embed nodes
    url: str | None = None
    alt: str | None = None
    oembed: dict | None = None

    model_config = {"frozen": True}

    @field_validator("text", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("spans", mode="before")
    @classmethod
    def _none_to_list(cls, value):
        return value or []


class ContentBlock(BaseModel):
    heading: str = ""
    body: list[RichTextSpan] = []

    model_config = {"frozen": True}

    @field_validator("heading", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("body", mode="before")
    @classmethod
    def _none_to_list(cls, value):
        return value or []


class Banner(BaseModel):
    url: str = ""

    model_config = {"frozen": True}

    @field_validator("url", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value


class PostData(BaseModel):
    title: str = ""
    subtitle: str = ""
    author: str = ""
    banner: Banner = Banner()
    content: list[ContentBlock] = []

    model_config = {"frozen": True}

    @field_validator("title", mode="before")
    @classmethod
    def _flatten_title(cls, value):
        # Titles may be typed as rich text in the repository
        if isinstance(value, list):
            from spacetraveling.services.rich_text import as_text

            return as_text([RichTextSpan.model_validate(node) for node in value])
        return "" if value is None else value

    @field_validator("subtitle", "author", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("banner", mode="before")
    @classmethod
    def _none_to_banner(cls, value):
        return value or {}

    @field_validator("content", mode="before")
    @classmethod
    def _none_to_list(cls, value):
        return value or []


class PostDocument(BaseModel):
    uid: str
    first_publication_date: str | None = None
    last_publication_date: str | None = None
    data: PostData = PostData()

    model_config = {"frozen": True}


class PostPagination(BaseModel):
    next_page: str | None = None
    results: list[PostDocument] = []
