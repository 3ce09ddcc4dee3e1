"""Tests for GenerationService."""
import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from silhouette_studio.core.errors import (
    ERROR_MESSAGES,
    ErrorCategory,
    MissingCredentialError,
    NoImageInResponseError,
)
from silhouette_studio.models.generation import GeneratedImage
from silhouette_studio.models.silhouette import Gender, SilhouetteConfig
from silhouette_studio.services.generation import GenerationService
from silhouette_studio.services.prompt import compose_prompt

IMAGE = GeneratedImage(
    mime_type="image/png",
    data_uri="data:image/png;base64,AAAA",
    filename="silhouette_20260224000000.png",
)


def _make_image_client_mock(**kwargs: object) -> MagicMock:
    mock = MagicMock()
    mock.generate_image = AsyncMock(**kwargs)
    return mock


class TestGenerate:
    async def test_success_populates_image(self) -> None:
        client = _make_image_client_mock(return_value=IMAGE)
        svc = GenerationService(image_client=client)
        result = await svc.generate(SilhouetteConfig(), "key")

        assert result.image_url == IMAGE.data_uri
        assert result.filename == IMAGE.filename
        assert result.error is None
        assert result.error_category is None
        assert result.loading is False

    async def test_sends_composed_prompt_and_key(self) -> None:
        config = SilhouetteConfig(gender=Gender.female, count=2)
        client = _make_image_client_mock(return_value=IMAGE)
        svc = GenerationService(image_client=client)
        result = await svc.generate(config, "key")

        client.generate_image.assert_called_once_with(compose_prompt(config), "key")
        assert result.prompt_used == compose_prompt(config)

    async def test_missing_credential_not_classified(self) -> None:
        client = _make_image_client_mock(side_effect=MissingCredentialError())
        result = await GenerationService(image_client=client).generate(SilhouetteConfig())

        assert result.error_category == ErrorCategory.missing_credential
        assert result.error == ERROR_MESSAGES[ErrorCategory.missing_credential]
        assert result.image_url is None

    async def test_no_image_not_classified(self) -> None:
        client = _make_image_client_mock(side_effect=NoImageInResponseError())
        result = await GenerationService(image_client=client).generate(SilhouetteConfig(), "k")

        assert result.error_category == ErrorCategory.no_image_in_response
        assert result.error == ERROR_MESSAGES[ErrorCategory.no_image_in_response]

    @pytest.mark.parametrize(
        "raw, category",
        [
            ("429 RESOURCE_EXHAUSTED", ErrorCategory.quota_exceeded),
            ("400 API key not valid", ErrorCategory.invalid_credential),
            ("rate limit", ErrorCategory.rate_limited),
            ("network is down", ErrorCategory.network_error),
        ],
    )
    async def test_upstream_errors_classified(self, raw: str, category: ErrorCategory) -> None:
        client = _make_image_client_mock(side_effect=RuntimeError(raw))
        result = await GenerationService(image_client=client).generate(SilhouetteConfig(), "k")

        assert result.error_category == category
        assert result.error == ERROR_MESSAGES[category]

    async def test_unknown_error_echoes_message(self) -> None:
        client = _make_image_client_mock(side_effect=RuntimeError("model overloaded"))
        result = await GenerationService(image_client=client).generate(SilhouetteConfig(), "k")

        assert result.error_category == ErrorCategory.unknown
        assert result.error == "오류: model overloaded"

    async def test_no_retry_on_failure(self) -> None:
        client = _make_image_client_mock(side_effect=RuntimeError("boom"))
        await GenerationService(image_client=client).generate(SilhouetteConfig(), "k")
        client.generate_image.assert_called_once()

    async def test_logs_error_on_upstream_failure(self, caplog: pytest.LogCaptureFixture) -> None:
        client = _make_image_client_mock(side_effect=RuntimeError("quota"))
        with caplog.at_level(logging.ERROR, logger="generation"):
            await GenerationService(image_client=client).generate(SilhouetteConfig(), "k")
        error_records = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(error_records) == 1
        assert error_records[0].error_category == "quota_exceeded"

    async def test_api_key_never_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        client = _make_image_client_mock(side_effect=RuntimeError("boom"))
        with caplog.at_level(logging.DEBUG):
            await GenerationService(image_client=client).generate(
                SilhouetteConfig(), "super-secret-key"
            )
        assert "super-secret-key" not in caplog.text
