# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


from typing import Annotated, Literal

from pydantic import AfterValidator, Field, SecretStr, TypeAdapter, model_validator
from pydantic.networks import EmailStr, HttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="allow")

    # Search providers
    SERPAPI_API_KEY: SecretStr | None = Field(
        default=None, description="The API key for SerpAPI, the primary search provider is skipped when unset"
    )
    SERPAPI_BASE_URL: Annotated[
        HttpUrl,
        Field(
            default_factory=lambda: TypeAdapter(HttpUrl).validate_python("https://serpapi.com/search.json"),
            description="The SerpAPI search endpoint",
        ),
        AfterValidator(str),
    ]
    SERPAPI_ENGINE: str = Field(default="google", description="The engine selector passed to SerpAPI")

    DDG_API_BASE_URL: Annotated[
        HttpUrl,
        Field(
            default_factory=lambda: TypeAdapter(HttpUrl).validate_python("https://api.duckduckgo.com/"),
            description="The DuckDuckGo Instant Answer endpoint",
        ),
        AfterValidator(str),
    ]

    SEARCH_TIMEOUT: float = Field(default=10, description="Seconds elapsed before a search request times out.", gt=0)

    SEARCH_MAX_SOURCES: int = Field(default=8, description="The number of sources requested for each query", ge=1)
    SEARCH_MAX_SCRAPED_SOURCES: int = Field(
        default=3, description="The number of leading sources whose page content is fetched", ge=0
    )

    # Scraping
    SCRAPER_API_KEY: SecretStr | None = Field(
        default=None, description="The API key for ScraperAPI, the scraping provider is skipped when unset"
    )
    SCRAPER_API_BASE_URL: Annotated[
        HttpUrl,
        Field(
            default_factory=lambda: TypeAdapter(HttpUrl).validate_python("http://api.scraperapi.com"),
            description="The ScraperAPI endpoint",
        ),
        AfterValidator(str),
    ]
    SCRAPER_TIMEOUT: float = Field(description="Seconds elapsed before a scraper stage times out.", default=15, gt=0)

    USER_AGENT_CONTACT: EmailStr | None = Field(default=None, description="Contact email for user-agent string")

    log_level: Literal["FATAL", "ERROR", "WARNING", "INFO", "DEBUG"] = Field(
        default="INFO", description="Set the log level for the pipeline"
    )

    # General task throttle
    MAX_CONCURRENT_TASKS: int = Field(
        default=30,
        description="The max. number of network tasks that can run simultaneously",
    )
    RATE_LIMIT_TASKS: int = Field(
        default=20,
        description="Rate limit for tasks in specified rate period",
    )
    RATE_PERIOD_TASKS: int = Field(
        default=2, description="Rate period in seconds, use with rate limit to implement throttle"
    )

    @model_validator(mode="after")
    def check_scrape_budget(self) -> "Settings":
        if self.SEARCH_MAX_SCRAPED_SOURCES > self.SEARCH_MAX_SOURCES:
            raise ValueError("SEARCH_MAX_SCRAPED_SOURCES must not exceed SEARCH_MAX_SOURCES")

        return self


settings = Settings()  # type: ignore[call-arg]
