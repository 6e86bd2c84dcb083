"""Errors surfaced by URL recipe scraping."""

GENERIC_SCRAPE_ERROR = "Failed to scrape recipe. Please try manual entry."


class RecipeScrapeError(Exception):
    """Scraping failed; the caller should fall back to manual entry."""

    def __init__(self, message: str = GENERIC_SCRAPE_ERROR):
        super().__init__(message)
        self.message = message


class RecipeUrlRequiredError(RecipeScrapeError):
    """Raised for a blank URL before any network call is made."""

    def __init__(self):
        super().__init__("URL is required")
