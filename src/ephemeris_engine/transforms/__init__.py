"""Pure coordinate-transform stages: vectors in, new arrays out."""
