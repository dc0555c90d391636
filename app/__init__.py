"""Application metadata and configuration for the tinymid tool."""
