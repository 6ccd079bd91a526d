"""Infrastructure: process runtime, filesystem, templates and host boundaries."""
