"""Small helpers shared by routes and views."""
