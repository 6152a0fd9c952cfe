"""Query templates and shareable query links."""
