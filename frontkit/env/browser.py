"""
Opening links in the user's web browser.

**Conceptual**: Thin wrappers over the webbrowser module that ignore bad
input instead of raising, so a click handler can pass whatever it has.

open_facebook_profile() mirrors the mobile "deep link with web fallback"
pattern: try the app URL first, and if nothing handled it within the
fallback delay, open the regular profile page.
"""

import logging
import threading
import time
import webbrowser
from typing import Any, Optional

from frontkit.numbers.validation import is_numeric
from frontkit.utils.text import number_to_text

logger = logging.getLogger(__name__)

FACEBOOK_WEB_URL = "https://www.facebook.com/{user_id}"
FACEBOOK_APP_URL = "fb://profile/{user_id}"
FALLBACK_DELAY_SECONDS = 1.5
# A fallback firing later than delay + grace means the deep link took over
# the foreground and held the timer back, so the app is showing the profile.
FALLBACK_GRACE_SECONDS = 0.1


def open_new_tab(link: Any) -> bool:
    """
    Open link in a new browser tab.

    Does nothing for non-strings and blank strings.

    Returns:
        True if the browser was asked to open the link.
    """
    if not isinstance(link, str) or not link.strip():
        return False

    try:
        return bool(webbrowser.open_new_tab(link))
    except webbrowser.Error as e:
        logger.warning("Could not open %s: %s", link, e)
        return False


def open_facebook_profile(
    fb_user_id: Any,
    is_mobile: bool = False,
    fallback_delay: float = FALLBACK_DELAY_SECONDS,
) -> Optional[threading.Timer]:
    """
    Open a Facebook profile in the app (mobile) or a browser tab (desktop).

    Args:
        fb_user_id: Profile id as int or numeric string. Anything that is not
                    a non-negative integer is ignored.
        is_mobile: Try the fb:// deep link first.
        fallback_delay: Seconds before the web fallback check runs.

    Returns:
        On mobile, the started fallback timer (already scheduled; it fires
        once and does nothing if the deep link was handled). None otherwise.
    """
    if not is_numeric(fb_user_id, is_integer=True, not_negative=True):
        return None

    user_id = number_to_text(fb_user_id)
    web_url = FACEBOOK_WEB_URL.format(user_id=user_id)

    if not is_mobile:
        open_new_tab(web_url)
        return None

    started = time.monotonic()
    try:
        app_opened = bool(webbrowser.open(FACEBOOK_APP_URL.format(user_id=user_id)))
    except webbrowser.Error as e:
        logger.debug("Deep link failed for %s: %s", fb_user_id, e)
        app_opened = False

    def _fallback() -> None:
        if app_opened:
            return
        if time.monotonic() - started < fallback_delay + FALLBACK_GRACE_SECONDS:
            open_new_tab(web_url)

    timer = threading.Timer(fallback_delay, _fallback)
    timer.daemon = True
    timer.start()
    return timer
