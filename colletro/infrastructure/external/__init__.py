"""External collaborators: cover rendering and metadata search sources."""
