"""Lambda stage that merges Textract query answers into the process record."""
