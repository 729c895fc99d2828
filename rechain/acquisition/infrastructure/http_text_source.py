"""
Чтение текста по URL через блокирующий HTTP GET.

Без таймаута и без повторов: зависший запрос блокирует утилиту.
"""

from typing import Mapping, Optional

import requests
from loguru import logger

from config.settings import HTTP_DEFAULT_ENCODING, HTTP_TIMEOUT, HTTP_USER_AGENT
from ..domain.exceptions import (
    AcquisitionDecodingError,
    AcquisitionHTTPStatusError,
    AcquisitionNetworkError,
)
from ..domain.interfaces import ITextSource


def response_encoding(headers: Mapping[str, str]) -> str:
    """
    Кодировка тела ответа.

    Charset из Content-Type разбирает requests. Его запасной ISO-8859-1
    для text/* не используется: без charset тело декодируется как UTF-8.

    Args:
        headers: Заголовки ответа (CaseInsensitiveDict у requests)
    """
    content_type = headers.get("content-type") or ""
    if "charset" not in content_type.lower():
        return HTTP_DEFAULT_ENCODING
    return requests.utils.get_encoding_from_headers(headers) or HTTP_DEFAULT_ENCODING


class HttpTextSource(ITextSource):
    """Источник текста: HTTP(S) ресурс."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        user_agent: str = HTTP_USER_AGENT,
        timeout: Optional[float] = HTTP_TIMEOUT,
    ):
        """
        Args:
            session: HTTP сессия (по умолчанию создаётся новая)
            user_agent: Значение заголовка User-Agent
            timeout: Таймаут запроса в секундах, None = без таймаута
        """
        self.session = session or requests.Session()
        self.user_agent = user_agent
        self.timeout = timeout

    def read(self, identifier: str) -> str:
        """
        Выполняет GET и декодирует тело ответа.

        Кодировка берётся из charset в Content-Type, иначе UTF-8.
        Декодирование строгое.

        Raises:
            AcquisitionNetworkError: DNS, соединение, некорректный URL
            AcquisitionHTTPStatusError: Неуспешный HTTP статус
            AcquisitionDecodingError: Тело не декодируется
        """
        logger.debug(f"[HttpTextSource] GET {identifier}")
        try:
            response = self.session.get(
                identifier,
                headers={"User-Agent": self.user_agent},
                allow_redirects=True,
                timeout=self.timeout,
            )
        except requests.exceptions.InvalidURL as e:
            raise AcquisitionNetworkError(
                message=f"Некорректный URL: {identifier}",
                component="HttpTextSource",
                original_error=e
            )
        except requests.exceptions.ConnectionError as e:
            raise AcquisitionNetworkError(
                message=f"Не удалось подключиться: {identifier}",
                component="HttpTextSource",
                original_error=e
            )
        except requests.exceptions.RequestException as e:
            raise AcquisitionNetworkError(
                message=f"Ошибка HTTP запроса: {identifier}",
                component="HttpTextSource",
                original_error=e
            )

        try:
            try:
                response.raise_for_status()
            except requests.exceptions.HTTPError as e:
                raise AcquisitionHTTPStatusError(
                    message=f"HTTP {response.status_code} для {identifier}",
                    status_code=response.status_code,
                    component="HttpTextSource",
                    original_error=e
                )

            content = response.content
            encoding = response_encoding(response.headers)
        finally:
            response.close()

        try:
            text = content.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            raise AcquisitionDecodingError(
                message=f"Ответ не декодируется как {encoding}: {identifier}",
                component="HttpTextSource",
                original_error=e
            )

        logger.debug(
            f"[HttpTextSource] Получено {len(content)} байт, "
            f"статус {response.status_code}, кодировка {encoding}"
        )
        return text
