"""Integration tests for URL shortener."""

import pytest
from httpx import AsyncClient, ASGITransport

from url_shortener.app import build_app, build_service
from url_shortener.config import Config
from url_shortener.lib.common.logging_config import setup_logging


@pytest.mark.asyncio
class TestIntegration:
    """End-to-end integration tests."""

    async def test_full_url_lifecycle(self):
        """Test complete URL shortening lifecycle."""
        config = Config(base_url="http://testserver", log_level="DEBUG", _env_file=None)
        app = build_app(config)

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
            # 1. Create short URL via API
            create_response = await client.post(
                "/api/shorten",
                json={"url": "https://Example.com/test/"}
            )
            assert create_response.status_code == 200
            short_code = create_response.json()["short_code"]
            assert create_response.json()["original_url"] == "https://example.com/test"

            # 2. Get URL info via API
            info_response = await client.get(f"/api/urls/{short_code}")
            assert info_response.status_code == 200
            assert info_response.json()["clicks"] == 0

            # 3. Access short URL (redirect)
            redirect_response = await client.get(
                f"/{short_code}",
                follow_redirects=False
            )
            assert redirect_response.status_code == 302
            assert redirect_response.headers["location"] == "https://example.com/test"

            # 4. Verify click counted
            info_response2 = await client.get(f"/api/urls/{short_code}")
            assert info_response2.json()["clicks"] == 1

            # 5. Shortening the same URL again reuses the code
            again = await client.post("/api/shorten", json={"url": "https://example.com/test"})
            assert again.json()["short_code"] == short_code
            assert again.json()["reused"] is True

    async def test_custom_code_workflow(self):
        """Test workflow with custom code."""
        config = Config(base_url="http://testserver", path_prefix="/s", _env_file=None)
        app = build_app(config)

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
            custom_code = "mycustomlink"
            response = await client.post(
                "/api/shorten",
                json={
                    "url": "https://github.com/user/repo",
                    "custom_code": custom_code
                }
            )

            assert response.status_code == 200
            assert response.json()["short_code"] == custom_code
            assert response.json()["short_url"] == "http://testserver/s/mycustomlink"

            redirect = await client.get(f"/{custom_code}", follow_redirects=False)
            assert redirect.status_code == 302

            # Try to create duplicate (should fail)
            duplicate = await client.post(
                "/api/shorten",
                json={
                    "url": "https://different-url.com",
                    "custom_code": custom_code
                }
            )
            assert duplicate.status_code == 409

    async def test_custom_codes_disabled_by_config(self):
        config = Config(enable_custom_codes=False, _env_file=None)
        app = build_app(config)

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
            response = await client.post(
                "/api/shorten",
                json={"url": "https://example.com/", "custom_code": "mine"}
            )

        assert response.status_code == 400


class TestConfiguredService:
    """Service wiring from configuration."""

    def test_build_service_uses_config(self):
        config = Config(
            short_code_length=8,
            max_generation_attempts=4,
            custom_code_min_length=5,
            custom_code_max_length=12,
            _env_file=None,
        )
        service = build_service(config, setup_logging(level="DEBUG"))

        assert service.generator.default_length == 8
        assert service.max_generation_attempts == 4
        assert service.custom_code_min_length == 5
        assert service.custom_code_max_length == 12
        assert len(service.shorten("https://example.com/")["short_code"]) == 8

    def test_config_defaults(self):
        config = Config(_env_file=None)

        assert config.short_code_length == 6
        assert config.max_generation_attempts == 10
        assert config.custom_code_min_length == 3
        assert config.custom_code_max_length == 20

    def test_config_from_environment(self, monkeypatch):
        monkeypatch.setenv("SHORT_CODE_LENGTH", "7")
        monkeypatch.setenv("ENABLE_CUSTOM_CODES", "false")

        config = Config(_env_file=None)

        assert config.short_code_length == 7
        assert config.enable_custom_codes is False

    def test_config_rejects_inverted_bounds(self):
        with pytest.raises(ValueError):
            Config(custom_code_min_length=10, custom_code_max_length=5, _env_file=None)
