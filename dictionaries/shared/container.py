# dictionaries/shared/container.py
from dependency_injector import containers, providers

from dictionaries.adapters.persistence.filesystem_source import DirectoryAssetSource
from dictionaries.adapters.persistence.package_source import PackageAssetSource
from dictionaries.core.domain.exceptions import DictionaryConfigError
from dictionaries.core.use_cases.load_dictionaries import LoadDictionaries
from dictionaries.shared.config import AssetSourceKind, settings


def _source_key(kind) -> str:
    # Selector keys are plain strings; settings hand us the enum member.
    try:
        return AssetSourceKind(kind).value
    except ValueError:
        raise DictionaryConfigError(
            f"Unknown asset source {kind!r}. Expected one of: "
            + ", ".join(k.value for k in AssetSourceKind)
        ) from None


def _execute(use_case: LoadDictionaries):
    return use_case.execute()


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    Holds the process-wide `Dictionaries` instance. Consumers ask the
    container (or `dictionaries.get_dictionaries()`) instead of importing
    module-level globals, and tests override `asset_source`.
    """

    # 1. Configuration
    # The default keeps the loaded settings in place after reset_override();
    # pydantic_settings values are applied as an override on top of it.
    config = providers.Configuration(
        default=settings.model_dump(),
        pydantic_settings=[settings],
    )

    # 2. Gateways (Infrastructure Adapters)
    asset_source = providers.Selector(
        providers.Callable(_source_key, config.ASSET_SOURCE),
        package=providers.Singleton(PackageAssetSource, package=config.ASSET_PACKAGE),
        directory=providers.Singleton(DirectoryAssetSource, base_dir=config.ASSET_DIR),
    )

    # 3. Use Cases
    load_dictionaries = providers.Factory(
        LoadDictionaries,
        source=asset_source,
        strict=config.STRICT_SCHEMA,
    )

    # 4. Loaded once, shared by every consumer
    dictionaries = providers.ThreadSafeSingleton(_execute, use_case=load_dictionaries)


# Instantiate the container for global access
container = Container()
