"""Section heading detection for uploaded PDF and DOCX documents."""
