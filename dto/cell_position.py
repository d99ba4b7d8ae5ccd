from pydantic import BaseModel, Field


class CellPosition(BaseModel):
    """0-based location of a cell plus its spreadsheet column letters."""
    row: int = Field(ge=0)
    column: int = Field(ge=0)
    column_label: str
