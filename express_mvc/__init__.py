"""Interactive scaffolder for Express MVC projects backed by MySQL or MongoDB."""
