"""Pydantic models for Textract document analysis output."""

from pydantic import BaseModel, ConfigDict, Field

BLOCK_TYPE_QUERY = "QUERY"
BLOCK_TYPE_QUERY_RESULT = "QUERY_RESULT"
RELATIONSHIP_ANSWER = "ANSWER"


class Relationship(BaseModel):
    """Link from one block to other blocks."""

    model_config = ConfigDict(populate_by_name=True)

    type: str = Field(alias="Type")
    ids: list[str] = Field(default_factory=list, alias="Ids")


class QueryInfo(BaseModel):
    """Query definition attached to a QUERY block."""

    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(alias="Text")
    alias: str | None = Field(default=None, alias="Alias")
    pages: list[str] = Field(default_factory=list, alias="Pages")


class Block(BaseModel):
    """A Textract block. Only the fields used downstream are modelled."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(alias="Id")
    block_type: str = Field(alias="BlockType")
    text: str | None = Field(default=None, alias="Text")
    confidence: float | None = Field(default=None, alias="Confidence")
    page: int | None = Field(default=None, alias="Page")
    relationships: list[Relationship] = Field(default_factory=list, alias="Relationships")
    query: QueryInfo | None = Field(default=None, alias="Query")


class TextractDataModel:
    """Read-only view over the blocks of a document analysis."""

    def __init__(self, blocks: list[Block]):
        self._blocks = list(blocks)
        self._by_id = {block.id: block for block in self._blocks}

    @classmethod
    def from_responses(cls, responses: list[dict]) -> "TextractDataModel":
        """Build the model from GetDocumentAnalysis response pages."""
        blocks = [
            Block.model_validate(raw)
            for response in responses
            for raw in response.get("Blocks", [])
        ]
        return cls(blocks)

    @property
    def blocks(self) -> list[Block]:
        return list(self._blocks)

    def get_block_by_id(self, block_id: str) -> Block | None:
        return self._by_id.get(block_id)

    def get_blocks_by_type(self, block_type: str) -> list[Block]:
        return [block for block in self._blocks if block.block_type == block_type]

    def __len__(self) -> int:
        return len(self._blocks)
