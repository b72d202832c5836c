"""Web front end: map page and JSON API for the trajectory core."""
