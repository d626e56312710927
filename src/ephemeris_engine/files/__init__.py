"""Binary ephemeris readers (packed SE1 files, JPL DE files, SPICE SPK) and Chebyshev evaluation."""
