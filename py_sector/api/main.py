"""FastAPI main application."""

from typing import Any, Dict, Optional

import structlog
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from ..config import settings
from ..core.sector import SectorConfig, generate_sector
from ..export import sector_to_geojson
from ..utils.log_config import configure_logging

configure_logging(settings.log_level, settings.log_format)

logger = structlog.get_logger()

app = FastAPI(
    title="Sector Plot Generator API",
    description="Voronoi-based building plot generation",
    version="0.1.0"
)


# Request/Response models
class SectorGenerationRequest(BaseModel):
    """Request to generate the plots of one sector."""

    seed: Optional[str] = Field(None, description="Random seed for reproducible generation")
    seed_count: int = Field(settings.default_seed_count, ge=0, le=settings.max_seed_count,
                            description="Number of seed points")
    sector_width: float = Field(settings.default_sector_width, gt=0,
                                le=settings.max_sector_size, description="Sector width")
    sector_height: float = Field(settings.default_sector_height, gt=0,
                                 le=settings.max_sector_size, description="Sector height")
    padding: float = Field(50.0, ge=0, description="Seed-free margin along sector edges")
    relaxation_iterations: int = Field(0, ge=0, le=10, description="Lloyd relaxation passes")
    street_width: float = Field(8.0, ge=0, description="Street width between plots")
    snap_size: float = Field(0.0, ge=0, description="Vertex snapping grid size (0 disables)")
    building_inset: float = Field(0.5, ge=0, description="Building inset from the pavement edge")
    min_edge_length: float = Field(5.0, ge=0, description="Minimum plot edge length")
    min_angle_degrees: float = Field(15.0, ge=0, le=180, description="Minimum interior angle")
    min_area: float = Field(25.0, ge=0, description="Minimum plot area")
    include_pavement: bool = Field(True, description="Include pavement plots in the output")

    def to_config(self) -> SectorConfig:
        return SectorConfig(
            seed_count=self.seed_count,
            sector_width=self.sector_width,
            sector_height=self.sector_height,
            padding=self.padding,
            relaxation_iterations=self.relaxation_iterations,
            street_width=self.street_width,
            snap_size=self.snap_size,
            building_inset=self.building_inset,
            min_edge_length=self.min_edge_length,
            min_angle_degrees=self.min_angle_degrees,
            min_area=self.min_area,
        )


class SectorGenerationResponse(BaseModel):
    """Generated plots plus per-stage rejection statistics."""

    seed: Optional[str]
    seeds: int
    raw_cells: int
    accepted: int
    rejected: Dict[str, int]
    plots: Dict[str, Any]


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Sector Plot Generator API",
        "version": "0.1.0",
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/sectors/generate", response_model=SectorGenerationResponse)
def generate_sector_plots(request: SectorGenerationRequest):
    """Generate a sector synchronously and return its plots as GeoJSON."""
    logger.info("Sector generation requested", request=request.model_dump())

    try:
        config = request.to_config()
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    result = generate_sector(config, seed=request.seed)

    return SectorGenerationResponse(
        seed=request.seed,
        seeds=len(result.seeds),
        raw_cells=len(result.raw_cells),
        accepted=len(result.accepted),
        rejected=result.rejection_counts(),
        plots=sector_to_geojson(result, include_pavement=request.include_pavement),
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
