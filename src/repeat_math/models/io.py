"""Input/output models shared by the core and the interfaces."""

from pydantic import BaseModel, Field


class WelcomeMessage(BaseModel):
    """Welcome message shown when the CLI starts without a command."""

    message: str = Field(
        default="Welcome to Repeat Math!",
        description="The welcome message text",
    )
    hint: str = Field(
        default="Type --help for more information",
        description="Hint for the user",
    )


class MultiplicationReport(BaseModel):
    """Outcome of a multiplication performed by repeated addition."""

    multiplicand: int = Field(description="The value added at every step")
    count: int = Field(description="The multiplier-count requested")
    base: int = Field(description="The fixed addend carried across steps")
    product: int = Field(description="The reported result")
    steps: int = Field(ge=0, description="Number of additions performed")
    zero_count_quirk: bool = Field(
        default=False,
        description="Whether a count of 0 returned the multiplicand",
    )
    corrected: bool = Field(
        default=False,
        description="Whether the zero-count result was replaced with 0",
    )
