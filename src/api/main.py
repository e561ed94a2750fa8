"""FastAPI app exposing biomorph breeding for the browser UI."""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from pydantic import BaseModel, Field

from biomorph import (
    BiomorphError,
    Generation,
    Genome,
    GenomeEngine,
    PhenotypeConfig,
    RecordingSink,
    SvgSink,
    generation_to_dict,
    genome_to_dict,
    render,
    segment_to_dict,
)

logger = logging.getLogger(__name__)

PARENT_CANVAS_SIZE = 400
CHILD_CANVAS_SIZE = 100
OFFSPRING_COUNT = 8

app = FastAPI(title="Biomorph Breeding API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ConfigPayload(BaseModel):
    use_segmentation: bool = False
    use_asymmetry: bool = False
    use_branching_factor: bool = False
    use_color: bool = True
    use_depth: bool = True
    use_angle_variation: bool = True
    use_length_variation: bool = True
    use_gradient_effect: bool = False
    use_alternate_segment_asymmetry: bool = False

    def to_config(self) -> PhenotypeConfig:
        return PhenotypeConfig.from_mapping(self.model_dump())


class SelectRequest(BaseModel):
    child_index: int = Field(ge=0)


class RenderRequest(BaseModel):
    genes: list[Any]
    config: Optional[ConfigPayload] = None
    width: float = PARENT_CANVAS_SIZE
    height: float = PARENT_CANVAS_SIZE


DEFAULT_CONFIG = PhenotypeConfig()

ENGINE = GenomeEngine()
CURRENT_GENERATION = Generation.start(ENGINE, DEFAULT_CONFIG, offspring_count=OFFSPRING_COUNT)


def _invalid_input(error: BiomorphError) -> HTTPException:
    return HTTPException(status_code=422, detail={"error": type(error).__name__, "message": str(error)})


def _svg_response(genome: Genome, config: PhenotypeConfig, size: int) -> Response:
    sink = SvgSink(width=size, height=size)
    render(genome, config, sink)
    return Response(content=sink.to_svg(), media_type="image/svg+xml")


@app.get("/state")
def get_state() -> dict[str, object]:
    return {"generation": generation_to_dict(CURRENT_GENERATION)}


@app.post("/randomize")
def randomize() -> dict[str, object]:
    CURRENT_GENERATION.randomize()
    logger.info("randomized parent: %s", CURRENT_GENERATION.parent.to_list())
    return {"generation": generation_to_dict(CURRENT_GENERATION)}


@app.post("/config")
def apply_config(request: ConfigPayload) -> dict[str, object]:
    CURRENT_GENERATION.apply_config(request.to_config())
    logger.info("applied config: %s", CURRENT_GENERATION.config)
    return {"generation": generation_to_dict(CURRENT_GENERATION)}


@app.post("/select")
def select(request: SelectRequest) -> dict[str, object]:
    try:
        CURRENT_GENERATION.select(request.child_index)
    except IndexError:
        raise HTTPException(status_code=404, detail="Child not found") from None
    logger.info("selected child %d: %s", request.child_index, CURRENT_GENERATION.parent.to_list())
    return {"generation": generation_to_dict(CURRENT_GENERATION)}


@app.post("/render")
def render_genome(request: RenderRequest) -> dict[str, object]:
    config = request.config.to_config() if request.config else DEFAULT_CONFIG
    sink = RecordingSink(width=request.width, height=request.height)
    try:
        genome = Genome.from_sequence(request.genes)
        render(genome, config, sink)
    except BiomorphError as error:
        raise _invalid_input(error) from error
    return {
        "genome": genome_to_dict(genome, config.use_color),
        "segments": [segment_to_dict(segment) for segment in sink.segments],
    }


@app.get("/parent.svg")
def parent_svg() -> Response:
    return _svg_response(CURRENT_GENERATION.parent, CURRENT_GENERATION.config, PARENT_CANVAS_SIZE)


@app.get("/children/{index}.svg")
def child_svg(index: int) -> Response:
    if not 0 <= index < len(CURRENT_GENERATION.children):
        raise HTTPException(status_code=404, detail="Child not found")
    return _svg_response(CURRENT_GENERATION.children[index], CURRENT_GENERATION.config, CHILD_CANVAS_SIZE)
