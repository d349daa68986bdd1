from pydantic import BaseModel, ConfigDict, Field


class Post(BaseModel):
    """A post returned by the similarity search."""

    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")

    id: str = Field(..., description="Identifier of the post")
    title: str = Field(..., description="Post title")
    text: str = Field(..., description="The post body text")
    similarity: float = Field(
        ..., description="Similarity to the question, 0-1, higher is closer"
    )


class SearchRequest(BaseModel):
    question: str | None = None


class SearchResponse(BaseModel):
    """Search response returning a list of `Post` results."""
    results: list[Post] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None


class HealthResponse(BaseModel):
    status: str
