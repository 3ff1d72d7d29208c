import os
from typing import Literal, get_args

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict, TomlConfigSettingsSource

OutputFormat = Literal["json", "text"]
LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS = list(get_args(LogLevel))


class Config(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FIELDY_TASKS_",
        toml_file=os.path.expanduser("~/.config/fieldy-tasks/config.toml"),
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    log_level: LogLevel = Field(
        default="WARNING",
        description="Level of the stderr log sink installed by the command line interface",
    )

    output_format: OutputFormat = Field(
        default="json",
        description="How extracted tasks are printed (json, text)",
    )

    json_indent: int = Field(
        default=2,
        description="Indentation used for JSON output",
    )

    prompt: str = Field(
        default="> ",
        description="Prompt shown while reading transcriptions in interactive mode",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _uppercase_level(cls, value):
        return value.upper() if isinstance(value, str) else value


config = Config()
