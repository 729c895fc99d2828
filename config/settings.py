"""
Настройки проекта rechain.

Только константы: утилита не читает ни переменных окружения,
ни конфигурационных файлов.
"""

# =============================================================================
# REGEX CHAIN
# =============================================================================
# Имя группы захвата, которая сужает текст для следующих выражений
CAPTURE_GROUP = "out"

# Разделитель строк в режиме line-by-line (ровно "\n", "\r" остаётся в строке)
LINE_SEPARATOR = "\n"

# =============================================================================
# ПОЛУЧЕНИЕ ТЕКСТА
# =============================================================================
# Кодировка локальных файлов (строгое декодирование)
FILE_ENCODING = "utf-8"

# Кодировка HTTP-ответа, если charset не указан в Content-Type
HTTP_DEFAULT_ENCODING = "utf-8"

# User-Agent для HTTP GET
HTTP_USER_AGENT = "rechain"

# Таймаут HTTP-запроса: None = ждать бесконечно, повторов нет
HTTP_TIMEOUT = None

# =============================================================================
# ЛОГИРОВАНИЕ
# =============================================================================
LOG_LEVEL_DEFAULT = "WARNING"
LOG_LEVEL_VERBOSE = "DEBUG"
LOG_FORMAT = "<level>{level: <8}</level> | <level>{message}</level>"
