"""Terminal output — rich console helpers and usage rendering."""
