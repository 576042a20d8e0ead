"""Tests for application startup wiring."""

import pytest
from fastapi import FastAPI

from articles_service import main
from articles_service.domain.exceptions import ConfigError


@pytest.mark.asyncio
async def test_lifespan_stores_repository_on_app_state(monkeypatch, fake_repository):
    monkeypatch.setattr(main, "build_article_repository", lambda settings: fake_repository)
    app = FastAPI()

    async with main.lifespan(app):
        assert app.state.article_repository is fake_repository


@pytest.mark.asyncio
async def test_lifespan_aborts_on_config_error(monkeypatch):
    def broken(settings):
        raise ConfigError("AWS region is not configured")

    monkeypatch.setattr(main, "build_article_repository", broken)

    with pytest.raises(ConfigError):
        async with main.lifespan(FastAPI()):
            pass


@pytest.mark.asyncio
async def test_lifespan_shuts_down_logging_on_exit(monkeypatch, fake_repository):
    calls: list[str] = []
    monkeypatch.setattr(main, "build_article_repository", lambda settings: fake_repository)
    monkeypatch.setattr(main, "shutdown_logging", lambda: calls.append("shutdown"))

    async with main.lifespan(FastAPI()):
        assert calls == []

    assert calls == ["shutdown"]
