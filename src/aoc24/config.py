from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from aoc24.log import LogLevel


class RunOptions(BaseModel):
    """
    What to run, as given on the command line.
    """

    model_config = ConfigDict(frozen=True)

    day: int | None = Field(None, gt=0, description="Day to run; every registered day if omitted")
    input: Path | None = Field(None, description="Input file, defaults to <inputs_dir>/day<N>.txt")
    timing: bool = False
    log_level: LogLevel = LogLevel.WARN
    inputs_dir: Path = Path("inputs")
