"""Browser session bootstrap.

Starts (or adopts) a Selenium driver and installs it as the ambient oracle
that relations consult.
"""

import logging

from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.remote.webdriver import WebDriver

from webdriver_logic.browser.context import current_context, set_context, set_oracle
from webdriver_logic.browser.selenium_oracle import SeleniumOracle
from webdriver_logic.core.config import Config
from webdriver_logic.core.exceptions import SessionError

logger = logging.getLogger(__name__)


def create_driver(config: Config | None = None) -> WebDriver:
    """Start a local WebDriver for the configured browser.

    Args:
        config: Optional Config instance. If not provided, creates from environment.

    Returns:
        Started WebDriver

    Raises:
        SessionError: If the browser is unsupported or fails to start
    """
    config = config or Config.from_env()
    browser = config.browser.lower()

    if browser == "chrome":
        options = webdriver.ChromeOptions()
        factory = webdriver.Chrome
    elif browser == "firefox":
        options = webdriver.FirefoxOptions()
        factory = webdriver.Firefox
    elif browser == "edge":
        options = webdriver.EdgeOptions()
        factory = webdriver.Edge
    else:
        raise SessionError(f"Unsupported browser: {config.browser}", browser=config.browser)

    if config.headless:
        options.add_argument("--headless")

    try:
        driver = factory(options=options)
    except WebDriverException as e:
        raise SessionError(
            f"Could not start {browser}",
            browser=browser,
            details={"error": e.msg or str(e)},
        ) from e

    driver.set_page_load_timeout(config.page_load_timeout)
    if config.implicit_wait:
        driver.implicitly_wait(config.implicit_wait)

    logger.info(f"Started {browser} session (headless={config.headless})")
    return driver


def set_driver(driver: WebDriver, url: str | None = None, config: Config | None = None) -> SeleniumOracle:
    """Adopt an existing driver as the ambient session.

    Args:
        driver: Started WebDriver
        url: Optional URL to navigate to
        config: Optional Config supplying the enumeration scopes

    Returns:
        The installed SeleniumOracle
    """
    oracle = SeleniumOracle(driver)
    if config is not None:
        set_context(config.query_context(oracle))
    else:
        set_oracle(oracle)
    if url:
        oracle.navigate(url)
    return oracle


def start_session(url: str | None = None, config: Config | None = None) -> SeleniumOracle:
    """Start a browser, optionally open ``url`` and make it the ambient session.

    Args:
        url: URL to open; defaults to the configured base URL
        config: Optional Config instance. If not provided, creates from environment.

    Returns:
        The installed SeleniumOracle
    """
    config = config or Config.from_env()
    config.validate()
    driver = create_driver(config)
    return set_driver(driver, url or config.base_url or None, config)


def end_session() -> None:
    """Quit the ambient session, if any, and clear it."""
    oracle = current_context().oracle
    if oracle is None:
        return
    try:
        oracle.quit()
    finally:
        set_oracle(None)
