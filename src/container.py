from dependency_injector import containers, providers

from src.adapters.config_adapter import BaseConfigAdapter
from src.processors.postman.body_encoder import BodyEncoder
from src.processors.postman.mime_types import MimeResolver
from src.processors.postman.request_renderer import RequestRenderer
from src.processors.postman_processor import PostmanProcessor
from src.services.file_service import FileService
from src.services.settings_service import SettingsService


class Container(containers.DeclarativeContainer):
    """Dependency injection container wiring the conversion services."""

    config_adapter = providers.Dependency(instance_of=BaseConfigAdapter)

    config = providers.Singleton(lambda adapter: adapter.config, config_adapter)

    file_service = providers.Factory(FileService)
    mime_resolver = providers.Singleton(MimeResolver)

    body_encoder = providers.Factory(
        BodyEncoder,
        boundary=providers.Callable(lambda config: config.boundary, config),
        mime_resolver=mime_resolver,
    )
    request_renderer = providers.Factory(RequestRenderer, body_encoder=body_encoder)
    settings_service = providers.Factory(SettingsService, config=config)

    postman_processor = providers.Factory(
        PostmanProcessor,
        file_service=file_service,
        request_renderer=request_renderer,
        settings_service=settings_service,
        config=config,
    )
