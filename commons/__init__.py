"""
Commons package: independent helper modules.

--- Quick Reference ---

1. Strings (strings.py) ★ most used
   from commons import strings
   - strings.is_blank(s) / strings.trim_to_none(s)
   - strings.to_camel_case("first_name")     'firstName'
   - strings.to_snake_case("firstName")      'first_name'
   - strings.is_number("-45.99")             True

2. Random codes (randoms.py)
   - randoms.next_number(6) / randoms.next_string(16)

3. Dates (dates.py)
   - dates.parse_date("2024-01-02 10:30")    datetime, None for blank
   - dates.now_time_string()                 '20240102103000'

4. HTTP headers (web.py)
   - web.is_json_request(headers, params)
   - web.check_if_none_match_etag(headers, etag)   (proceed, status)

5. External tools
   - audio.convert(src, dest) / audio.duration(path)   needs ffmpeg
   - qrcode_encoder.encode(text, output, logo)
   - pinyin.pinyin("中国") / pinyin.pinyin_head_char("中国")

6. Validation (validation.py)
   - validation.is_valid_email(s), validation.TelecomProvider.detect(mobile)

7. Resources (io_helper.py)
   - io_helper.close_quietly(a, b, ...)

8. Logging (logger.py)
   from commons.logger import setup_logger
   - logger = setup_logger('module_name')

--- Notes ---
- Log through setup_logger(), not print(); mobile numbers and e-mails are masked
- Helpers raise ValueError for bad input; asserts raise InvalidArgumentError
"""

from .logger import setup_logger, default_logger, LoggingContext, set_logging_mode, get_logging_mode

__all__ = [
    'setup_logger',
    'default_logger',
    'LoggingContext',
    'set_logging_mode',
    'get_logging_mode',
]
