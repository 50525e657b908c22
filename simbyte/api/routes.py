from fastapi import APIRouter, HTTPException
from fastapi.responses import StreamingResponse
from typing import Iterator, List
import logging

from .models import PayloadRequest, GeneratorInfo, HealthResponse
from ..core.registry import PluginRegistry
from ..core.random_source import make_random_source

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=HealthResponse)
async def health_check():
    generators_count = len(PluginRegistry.list_generators())
    return HealthResponse(generators_available=generators_count)


@router.get("/generators", response_model=List[GeneratorInfo])
async def list_generators():
    generator_names = PluginRegistry.list_generators()
    generators_info = []

    for name in generator_names:
        generator_class = PluginRegistry.get_generator(name)
        if generator_class:
            generators_info.append(GeneratorInfo(
                name=name,
                description=generator_class.__doc__,
                config_schema=generator_class.config_model.model_json_schema()
            ))

    return generators_info


@router.post("/generate/{generator_name}")
async def generate_payloads(generator_name: str, request: PayloadRequest):
    generator_class = PluginRegistry.get_generator(generator_name)
    if generator_class is None:
        raise HTTPException(status_code=404, detail=f"Unknown generator: {generator_name}")

    # pydantic ValidationError and ConfigError are both ValueErrors
    try:
        config = generator_class.config_model(**request.config)
        generator = PluginRegistry.create_generator(generator_name, config)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    seed = request.seed if request.seed is not None else config.seed
    rng = make_random_source(seed, request.backend)
    logger.info("Streaming %d x %d bytes from %s", request.count, request.size, generator_name)

    def generate_stream() -> Iterator[bytes]:
        for payload in generator.payloads(request.size, request.count, rng):
            yield bytes(payload)

    return StreamingResponse(
        generate_stream(),
        media_type="application/octet-stream",
        headers={
            "Cache-Control": "no-cache",
            "X-Estimated-Compression-Ratio": str(generator.estimated_max_compression_ratio()),
        }
    )
