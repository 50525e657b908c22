from typing import Dict, Type, List, Optional
import importlib
import logging
import pkgutil
from pathlib import Path

from .generator import BaseDataGenerator, GeneratorConfig

logger = logging.getLogger(__name__)


class PluginRegistry:
    _instance: Optional["PluginRegistry"] = None
    _generators: Dict[str, Type[BaseDataGenerator]] = {}

    def __new__(cls) -> "PluginRegistry":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def register(cls, name: str, generator_class: Type[BaseDataGenerator]) -> None:
        if not (isinstance(generator_class, type) and issubclass(generator_class, BaseDataGenerator)):
            raise ValueError(f"Generator {generator_class} must inherit from BaseDataGenerator")
        cls._generators[name] = generator_class

    @classmethod
    def get_generator(cls, name: str) -> Optional[Type[BaseDataGenerator]]:
        return cls._generators.get(name)

    @classmethod
    def list_generators(cls) -> List[str]:
        return list(cls._generators.keys())

    @classmethod
    def create_generator(cls, name: str, config: GeneratorConfig) -> BaseDataGenerator:
        generator_class = cls.get_generator(name)
        if generator_class is None:
            raise ValueError(f"Unknown generator: {name}")
        return generator_class(config)

    @classmethod
    def discover_generators(cls, package_path: str = "simbyte.generators") -> None:
        try:
            package = importlib.import_module(package_path)
        except ImportError:
            logger.warning("Generator package %s not found", package_path)
            return

        package_dir = Path(package.__file__).parent

        # Importing a module runs its @register_generator decorators
        for _, module_name, _ in pkgutil.iter_modules([str(package_dir)]):
            module_path = f"{package_path}.{module_name}"
            try:
                importlib.import_module(module_path)
            except ImportError as e:
                logger.warning("Skipping generator module %s: %s", module_path, e)
                continue

        logger.info("Discovered generators: %s", ", ".join(cls.list_generators()))


def register_generator(name: str):
    def decorator(cls: Type[BaseDataGenerator]) -> Type[BaseDataGenerator]:
        PluginRegistry.register(name, cls)
        return cls
    return decorator
