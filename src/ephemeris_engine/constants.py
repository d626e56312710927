"""Fixed constants: body numbers, calculation flags, physical and time constants."""

import math

# Body numbers (public API)
SUN = 0
MOON = 1
MERCURY = 2
VENUS = 3
MARS = 4
JUPITER = 5
SATURN = 6
URANUS = 7
NEPTUNE = 8
PLUTO = 9
MEAN_NODE = 10
TRUE_NODE = 11
MEAN_APOG = 12
OSCU_APOG = 13
EARTH = 14
CHIRON = 15
PHOLUS = 16
CERES = 17
PALLAS = 18
JUNO = 19
VESTA = 20
NPLANETS = 21
AST_OFFSET = 10000  # numbered minor planet n is body AST_OFFSET + n
FICT_OFFSET = 40  # user-defined element sets are FICT_OFFSET + k

BODY_NAMES = {
    SUN: 'Sun',
    MOON: 'Moon',
    MERCURY: 'Mercury',
    VENUS: 'Venus',
    MARS: 'Mars',
    JUPITER: 'Jupiter',
    SATURN: 'Saturn',
    URANUS: 'Uranus',
    NEPTUNE: 'Neptune',
    PLUTO: 'Pluto',
    MEAN_NODE: 'mean Node',
    TRUE_NODE: 'true Node',
    MEAN_APOG: 'mean Apogee',
    OSCU_APOG: 'osc. Apogee',
    EARTH: 'Earth',
    CHIRON: 'Chiron',
    PHOLUS: 'Pholus',
    CERES: 'Ceres',
    PALLAS: 'Pallas',
    JUNO: 'Juno',
    VESTA: 'Vesta',
}

# Bodies derived from the lunar orbit rather than read or evaluated directly
LUNAR_POINTS = (MEAN_NODE, TRUE_NODE, MEAN_APOG, OSCU_APOG)

# Calculation flags (open bitset; bits are independent)
FLG_JPLEPH = 1
FLG_SWIEPH = 2
FLG_SERIES = 4
FLG_HELCTR = 8
FLG_TRUEPOS = 16
FLG_J2000 = 32
FLG_NONUT = 64
FLG_SPEED = 256
FLG_NOGDEFL = 512
FLG_NOABERR = 1024
FLG_ASTROMETRIC = FLG_NOABERR | FLG_NOGDEFL
FLG_EQUATORIAL = 2048
FLG_XYZ = 4096
FLG_RADIANS = 8192
FLG_BARYCTR = 16384
FLG_TOPOCTR = 32768
FLG_SIDEREAL = 65536
FLG_ICRS = 131072
FLG_EPHMASK = FLG_JPLEPH | FLG_SWIEPH | FLG_SERIES
FLG_DEFAULT = FLG_SWIEPH

# Angles
DEGTORAD = math.pi / 180.0
RADTODEG = 180.0 / math.pi
TWOPI = 2.0 * math.pi
ARCSEC_TO_RAD = DEGTORAD / 3600.0
DEGREES_PER_CIRCLE = 360.0

# Time
J2000 = 2451545.0
B1950 = 2433282.42345905
J1900 = 2415020.0
SECONDS_PER_DAY = 86400.0
DAYS_PER_JULIAN_CENTURY = 36525.0
DAYS_PER_JULIAN_MILLENNIUM = 365250.0
JD_AT_DAY0 = 2451544.5  # JD of 2000-01-01 00:00, day 0 of rms-julian
TT_MINUS_TAI_SECONDS = 32.184

# Physical constants (IAU 2009/2012 values; SI units unless noted)
CLIGHT = 2.99792458e8  # m/s
AUNIT = 1.49597870700e11  # m
HELGRAVCONST = 1.32712440017987e20  # m^3/s^2
GEOGCONST = 3.98600448e14  # m^3/s^2
EARTH_MOON_MRAT = 1.0 / 0.0123000383
EARTH_RADIUS_M = 6378136.6
EARTH_OBLATENESS = 1.0 / 298.25642
EARTH_ROT_SPEED = 7.2921151467e-5 * SECONDS_PER_DAY  # rad/day
SUN_RADIUS_AU = 959.63 / 3600.0 * DEGTORAD  # radius in AU (angular radius at 1 AU)
SUN_DIAMETER_M = 1392000000.0
MOON_DIAMETER_M = 3474800.0
EARTH_DIAMETER_M = 2.0 * EARTH_RADIUS_M
CLIGHT_AU_PER_DAY = CLIGHT * SECONDS_PER_DAY / AUNIT
LIGHTTIME_AUNIT = AUNIT / CLIGHT / SECONDS_PER_DAY  # days light needs for 1 AU

# Finite-difference intervals (days)
PLAN_SPEED_INTV = 0.0001
MOON_SPEED_INTV = 0.00005
DEFL_SPEED_INTV = 0.0000005
SYMMETRIC_SPEED_INTV = 1.0 / 288.0

# Light-time iteration
LIGHTTIME_MAX_ITER = 3
LIGHTTIME_TOLERANCE = 1e-10  # days

# Tidal acceleration of the Moon (arcsec/cy^2) by ephemeris
TIDAL_DE200 = -23.8946
TIDAL_DE403 = -25.826
TIDAL_DE404 = -25.826
TIDAL_DE405 = -25.826
TIDAL_DE406 = -25.826
TIDAL_DE430 = -25.80
TIDAL_DE431 = -25.80
TIDAL_26 = -26.0
TIDAL_STEPHENSON_2016 = -25.85
TIDAL_DEFAULT = TIDAL_DE431
TIDAL_AUTOMATIC = 999999.0

TIDAL_BY_DE_NUMBER = {
    200: TIDAL_DE200,
    403: TIDAL_DE403,
    404: TIDAL_DE404,
    405: TIDAL_DE405,
    406: TIDAL_DE406,
    430: TIDAL_DE430,
    431: TIDAL_DE431,
}

# Delta-T models
DELTAT_TABLE = 'table'
DELTAT_POLYNOMIAL = 'polynomial'
DELTAT_OVERRIDE = 'override'

# Precession / nutation / bias models
PREC_IAU_1976 = 'iau1976'
PREC_IAU_2000 = 'iau2000'
PREC_IAU_2006 = 'iau2006'
PREC_NEWCOMB = 'newcomb'
PREC_DEFAULT = PREC_IAU_2006

NUT_IAU_1980 = 'iau1980'
NUT_SHORT = 'short'
NUT_JPL = 'jpl'
NUT_DEFAULT = NUT_IAU_1980

BIAS_IAU_2000 = 'iau2000'
BIAS_IAU_2006 = 'iau2006'
BIAS_NONE = 'none'
BIAS_DEFAULT = BIAS_IAU_2006

# Backends
BACKEND_SWEPH = 'sweph'
BACKEND_JPL = 'jpl'
BACKEND_SERIES = 'series'
BACKEND_SPK = 'spk'

# Sidereal modes
SIDM_FAGAN_BRADLEY = 0
SIDM_LAHIRI = 1
SIDM_DELUCE = 2
SIDM_RAMAN = 3
SIDM_KRISHNAMURTI = 5
SIDM_USER = 255

# Rise/set event kinds (bitset)
CALC_RISE = 1
CALC_SET = 2
CALC_MTRANSIT = 4
CALC_ITRANSIT = 8
BIT_DISC_CENTER = 256
BIT_DISC_BOTTOM = 8192
BIT_NO_REFRACTION = 512

# Eclipse type flags (bitset)
ECL_CENTRAL = 1
ECL_NONCENTRAL = 2
ECL_TOTAL = 4
ECL_ANNULAR = 8
ECL_PARTIAL = 16
ECL_ANNULAR_TOTAL = 32
ECL_PENUMBRAL = 64
ECL_ALLTYPES_SOLAR = (
    ECL_CENTRAL | ECL_NONCENTRAL | ECL_TOTAL | ECL_ANNULAR | ECL_PARTIAL | ECL_ANNULAR_TOTAL
)
ECL_ALLTYPES_LUNAR = ECL_TOTAL | ECL_PARTIAL | ECL_PENUMBRAL

# Local eclipse visibility (bitset, combined with the type flags)
ECL_VISIBLE = 128
ECL_MAX_VISIBLE = 256
ECL_1ST_VISIBLE = 512  # partial phase begins
ECL_2ND_VISIBLE = 1024  # total phase begins
ECL_3RD_VISIBLE = 2048  # total phase ends
ECL_4TH_VISIBLE = 4096  # partial phase ends
ECL_PENUMBBEG_VISIBLE = 16384
ECL_PENUMBEND_VISIBLE = 32768

# Planetary nodes and apsides methods (bitset)
NODBIT_MEAN = 1
NODBIT_OSCU = 2
NODBIT_OSCU_BAR = 4
NODBIT_FOPOINT = 256

# Mean synodic month (days)
SYNODIC_MONTH = 29.530588853
