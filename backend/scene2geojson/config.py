"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from scene2geojson.engine.config import ConversionConfig, EllipsePolicy, IdPolicy


class Settings(BaseSettings):
    scene2geojson_env: str = "development"
    scene2geojson_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Conversion defaults (overridable per request)
    id_policy: IdPolicy = IdPolicy.VERBATIM
    ellipse_policy: EllipsePolicy = EllipsePolicy.POLYGON
    arc_segments: int = 64
    stairs_marker: str = "stairs"
    orient_rings: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def conversion_config(self) -> ConversionConfig:
        return ConversionConfig(
            id_policy=self.id_policy,
            ellipse_policy=self.ellipse_policy,
            arc_segments=self.arc_segments,
            stairs_marker=self.stairs_marker,
            orient_rings=self.orient_rings,
        )


settings = Settings()
