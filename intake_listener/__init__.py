"""File intake listener - queue consumer and storage notification observer."""
