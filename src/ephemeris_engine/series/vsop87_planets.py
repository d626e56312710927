"""Truncated VSOP87D series for Venus and the outer planets (ecliptic and equinox of date).

The tables follow the abridged VSOP87D of Meeus, Astronomical Algorithms,
appendix III, with the same term layout as vsop87_earth. Over 1900..2100
the truncation keeps the heliocentric longitudes within a few arcseconds.
"""

from __future__ import annotations

from ephemeris_engine.constants import (
    DAYS_PER_JULIAN_MILLENNIUM,
    J2000,
    JUPITER,
    MARS,
    NEPTUNE,
    SATURN,
    URANUS,
    VENUS,
)
from ephemeris_engine.series.vsop87_earth import Term, fk5_correction, sum_series

VENUS_L0: tuple[Term, ...] = (
    (317614667.0, 0.0, 0.0),
    (1353968.0, 5.5931332, 10213.2855462),
    (89892.0, 5.30650, 20426.57109),
    (5477.0, 4.4163, 7860.4194),
    (3456.0, 2.6996, 11790.6291),
    (2372.0, 2.9938, 3930.2097),
    (1664.0, 4.2502, 1577.3435),
    (1438.0, 4.1575, 9683.5946),
    (1317.0, 5.1867, 26.2983),
    (1201.0, 6.1536, 30639.8566),
    (769.0, 0.816, 9437.763),
    (761.0, 1.950, 529.691),
    (708.0, 1.065, 775.523),
    (585.0, 3.998, 191.448),
    (500.0, 4.123, 15720.839),
    (429.0, 3.586, 19367.189),
    (327.0, 5.677, 5507.553),
    (326.0, 4.591, 10404.734),
    (232.0, 3.163, 9153.904),
    (180.0, 4.653, 1109.379),
    (155.0, 5.570, 19651.048),
    (128.0, 4.226, 20.775),
    (128.0, 0.962, 5661.332),
    (106.0, 1.537, 801.821),
)

VENUS_L1: tuple[Term, ...] = (
    (1021352943053.0, 0.0, 0.0),
    (95708.0, 2.46424, 10213.28555),
    (14445.0, 0.51625, 20426.57109),
    (213.0, 1.795, 30639.857),
    (174.0, 2.655, 26.298),
    (152.0, 6.106, 1577.344),
    (82.0, 5.70, 191.45),
    (70.0, 2.68, 9437.76),
    (52.0, 3.60, 775.52),
    (38.0, 1.03, 529.69),
    (30.0, 1.25, 5507.55),
    (25.0, 6.11, 10404.73),
)

VENUS_L2: tuple[Term, ...] = (
    (54127.0, 0.0, 0.0),
    (3891.0, 0.3451, 10213.2855),
    (1338.0, 2.0201, 20426.5711),
    (24.0, 2.05, 26.30),
    (19.0, 3.54, 30639.86),
    (10.0, 3.97, 775.52),
    (7.0, 1.52, 1577.34),
    (6.0, 1.00, 191.45),
)

VENUS_L3: tuple[Term, ...] = (
    (136.0, 4.804, 10213.286),
    (78.0, 3.67, 20426.57),
    (26.0, 0.0, 0.0),
)

VENUS_L4: tuple[Term, ...] = (
    (114.0, 3.1416, 0.0),
    (3.0, 5.21, 20426.57),
    (2.0, 2.51, 10213.29),
)

VENUS_L5: tuple[Term, ...] = (
    (1.0, 3.14, 0.0),
)

VENUS_B0: tuple[Term, ...] = (
    (5923638.0, 0.2670278, 10213.2855462),
    (40108.0, 1.14737, 20426.57109),
    (32815.0, 3.14159, 0.0),
    (1011.0, 1.0895, 30639.8566),
    (149.0, 6.254, 18073.705),
    (138.0, 0.860, 1577.344),
    (130.0, 3.672, 9437.763),
    (120.0, 3.705, 2352.866),
    (108.0, 4.539, 22003.915),
)

VENUS_B1: tuple[Term, ...] = (
    (513348.0, 1.803643, 10213.285546),
    (4380.0, 3.3862, 20426.5711),
    (199.0, 0.0, 0.0),
    (197.0, 2.530, 30639.857),
)

VENUS_B2: tuple[Term, ...] = (
    (22378.0, 3.38509, 10213.28555),
    (282.0, 0.0, 0.0),
    (173.0, 5.256, 20426.571),
    (27.0, 3.87, 30639.86),
)

VENUS_B3: tuple[Term, ...] = (
    (647.0, 4.992, 10213.286),
    (20.0, 3.14, 0.0),
    (6.0, 0.77, 20426.57),
    (3.0, 5.44, 30639.86),
)

VENUS_B4: tuple[Term, ...] = (
    (14.0, 0.32, 10213.29),
)

VENUS_R0: tuple[Term, ...] = (
    (72334821.0, 0.0, 0.0),
    (489824.0, 4.021518, 10213.285546),
    (1658.0, 4.9021, 20426.5711),
    (1632.0, 2.8455, 7860.4194),
    (1378.0, 1.1285, 11790.6291),
    (498.0, 2.587, 9683.595),
    (374.0, 1.423, 3930.210),
    (264.0, 5.529, 9437.763),
    (237.0, 2.551, 15720.839),
    (222.0, 2.013, 19367.189),
    (126.0, 2.728, 1577.344),
    (119.0, 3.020, 10404.734),
)

VENUS_R1: tuple[Term, ...] = (
    (34551.0, 0.89199, 10213.28555),
    (234.0, 1.772, 20426.571),
    (234.0, 3.142, 0.0),
)

VENUS_R2: tuple[Term, ...] = (
    (1407.0, 5.0637, 10213.2855),
    (16.0, 5.47, 20426.57),
    (13.0, 0.0, 0.0),
)

VENUS_R3: tuple[Term, ...] = (
    (50.0, 3.22, 10213.29),
)

VENUS_R4: tuple[Term, ...] = (
    (1.0, 0.92, 10213.29),
)

MARS_L0: tuple[Term, ...] = (
    (620347712.0, 0.0, 0.0),
    (18656368.0, 5.05037100, 3340.61242670),
    (1108217.0, 5.4009984, 6681.2248534),
    (91798.0, 5.75479, 10021.83728),
    (27745.0, 5.97050, 3.52312),
    (12316.0, 0.84956, 2810.92146),
    (10610.0, 2.93959, 2281.23050),
    (8927.0, 4.1570, 0.0173),
    (8716.0, 6.1101, 13362.4497),
    (7775.0, 3.3397, 5621.8429),
    (6798.0, 0.3646, 398.1490),
    (4161.0, 0.2281, 2942.4634),
    (3575.0, 1.6619, 2544.3144),
    (3075.0, 0.8570, 191.4483),
    (2938.0, 6.0789, 0.0673),
    (2628.0, 0.6481, 3337.0893),
    (2580.0, 0.0300, 3344.1355),
    (2389.0, 5.0390, 796.2980),
    (1799.0, 0.6563, 529.6910),
    (1546.0, 2.9158, 1751.5395),
    (1528.0, 1.1498, 6151.5339),
    (1286.0, 3.0680, 2146.1654),
    (1264.0, 3.6228, 5092.1520),
    (1025.0, 3.6933, 8962.4553),
    (892.0, 0.183, 16703.062),
    (859.0, 2.401, 2914.014),
    (833.0, 4.495, 3340.630),
    (833.0, 2.464, 3340.595),
    (749.0, 3.822, 155.420),
    (724.0, 0.675, 3738.761),
    (713.0, 3.663, 1059.382),
    (655.0, 0.489, 3127.313),
    (636.0, 2.922, 8432.764),
    (553.0, 4.475, 1748.016),
    (550.0, 3.810, 0.980),
    (472.0, 3.625, 1194.447),
    (426.0, 0.554, 6283.076),
    (415.0, 0.497, 213.299),
    (312.0, 0.999, 6677.702),
    (307.0, 0.381, 6684.748),
    (302.0, 4.486, 3532.061),
    (299.0, 2.783, 6254.627),
    (293.0, 4.221, 20.775),
    (284.0, 5.769, 3149.164),
    (281.0, 5.882, 1349.867),
    (274.0, 0.542, 3340.545),
    (274.0, 0.134, 3340.680),
    (239.0, 5.372, 4136.910),
    (236.0, 5.755, 3333.499),
    (231.0, 1.282, 3870.303),
    (221.0, 3.505, 382.897),
    (204.0, 2.821, 1221.849),
    (193.0, 3.357, 3.590),
    (189.0, 1.491, 9492.146),
    (179.0, 1.006, 951.718),
    (174.0, 2.414, 553.569),
    (172.0, 0.439, 5486.778),
    (160.0, 3.949, 4562.461),
    (144.0, 1.419, 135.065),
    (140.0, 3.326, 2700.715),
    (138.0, 4.301, 7.114),
    (131.0, 4.045, 12303.068),
    (128.0, 2.208, 1592.596),
    (128.0, 1.807, 5088.629),
    (117.0, 3.128, 7903.073),
    (113.0, 3.701, 1589.073),
    (110.0, 1.052, 242.729),
    (105.0, 0.785, 8827.390),
    (100.0, 3.243, 11773.377),
)

MARS_L1: tuple[Term, ...] = (
    (334085627474.0, 0.0, 0.0),
    (1458227.0, 3.6042605, 3340.6124267),
    (164901.0, 3.926313, 6681.224853),
    (19963.0, 4.26594, 10021.83728),
    (3452.0, 4.7321, 3.5231),
    (2485.0, 4.6128, 13362.4497),
    (842.0, 4.459, 2281.230),
    (538.0, 5.016, 398.149),
    (521.0, 4.994, 3344.136),
    (433.0, 2.561, 191.448),
    (430.0, 5.316, 155.420),
    (382.0, 3.539, 796.298),
    (314.0, 4.963, 16703.062),
    (283.0, 3.160, 2544.314),
    (206.0, 4.569, 2146.165),
    (169.0, 1.329, 3337.089),
    (158.0, 4.185, 1751.540),
    (134.0, 2.233, 0.980),
    (134.0, 5.974, 1748.016),
    (118.0, 6.024, 6151.534),
    (117.0, 2.213, 1059.382),
    (114.0, 2.129, 1194.447),
    (114.0, 5.428, 3738.761),
    (91.0, 1.10, 1349.87),
    (85.0, 3.91, 553.57),
    (83.0, 5.30, 6684.75),
    (81.0, 4.43, 529.69),
    (80.0, 2.25, 8962.46),
    (73.0, 2.50, 951.72),
    (73.0, 5.84, 242.73),
    (71.0, 3.86, 2914.01),
    (68.0, 5.02, 382.90),
    (65.0, 1.02, 3340.60),
    (65.0, 3.05, 3340.63),
    (62.0, 4.15, 3149.16),
    (57.0, 3.89, 4136.91),
    (48.0, 4.87, 213.30),
    (48.0, 1.18, 3333.50),
    (47.0, 1.31, 3185.19),
    (41.0, 0.71, 1592.60),
    (40.0, 2.73, 7.11),
    (40.0, 5.32, 20043.67),
    (33.0, 5.41, 6283.08),
    (28.0, 0.05, 9492.15),
    (27.0, 3.89, 1221.85),
    (27.0, 5.11, 2700.72),
)

MARS_L2: tuple[Term, ...] = (
    (58016.0, 2.04979, 3340.61243),
    (54188.0, 0.0, 0.0),
    (13908.0, 2.45742, 6681.22485),
    (2465.0, 2.8000, 10021.8373),
    (398.0, 3.141, 13362.450),
    (222.0, 3.194, 3.523),
    (121.0, 0.543, 155.420),
    (62.0, 3.49, 16703.06),
    (54.0, 3.54, 3344.14),
    (34.0, 6.00, 2281.23),
    (32.0, 4.14, 191.45),
    (30.0, 2.00, 796.30),
    (23.0, 4.33, 242.73),
    (22.0, 3.45, 398.15),
    (20.0, 5.42, 553.57),
    (16.0, 0.66, 0.98),
    (16.0, 6.11, 2146.17),
    (16.0, 1.22, 1748.02),
    (15.0, 6.10, 3185.19),
    (14.0, 4.02, 951.72),
    (14.0, 2.62, 1349.87),
    (13.0, 0.60, 1194.45),
    (12.0, 3.86, 6684.75),
    (11.0, 4.72, 2544.31),
    (10.0, 0.25, 382.90),
    (9.0, 0.68, 1059.38),
    (9.0, 3.83, 20043.67),
    (9.0, 3.88, 3738.76),
    (8.0, 5.46, 1751.54),
    (7.0, 2.58, 3149.16),
    (7.0, 2.38, 4136.91),
    (6.0, 5.48, 1592.60),
    (6.0, 2.34, 3097.88),
)

MARS_L3: tuple[Term, ...] = (
    (1482.0, 0.4443, 3340.6124),
    (662.0, 0.885, 6681.225),
    (188.0, 1.288, 10021.837),
    (41.0, 1.65, 13362.45),
    (26.0, 0.0, 0.0),
    (23.0, 2.05, 155.42),
    (10.0, 1.58, 3.52),
    (8.0, 2.00, 16703.06),
    (5.0, 2.82, 242.73),
    (4.0, 2.02, 3344.14),
    (3.0, 4.59, 3185.19),
    (3.0, 0.65, 553.57),
)

MARS_L4: tuple[Term, ...] = (
    (114.0, 3.1416, 0.0),
    (29.0, 5.64, 6681.22),
    (24.0, 5.14, 3340.61),
    (11.0, 6.03, 10021.84),
    (3.0, 0.13, 13362.45),
    (3.0, 3.56, 155.42),
    (1.0, 0.49, 16703.06),
    (1.0, 1.32, 242.73),
)

MARS_L5: tuple[Term, ...] = (
    (1.0, 3.14, 0.0),
    (1.0, 4.04, 6681.22),
)

MARS_B0: tuple[Term, ...] = (
    (3197135.0, 3.7683204, 3340.6124267),
    (298033.0, 4.106170, 6681.224853),
    (289105.0, 0.0, 0.0),
    (31366.0, 4.44651, 10021.83728),
    (3484.0, 4.7881, 13362.4497),
    (443.0, 5.026, 3344.136),
    (443.0, 5.652, 3337.089),
    (399.0, 5.131, 16703.062),
    (293.0, 3.793, 2281.230),
    (182.0, 6.136, 6151.534),
    (163.0, 4.264, 529.691),
    (160.0, 2.232, 1059.382),
    (149.0, 2.165, 5621.843),
    (143.0, 1.182, 3340.595),
    (143.0, 3.213, 3340.630),
    (139.0, 2.418, 8962.455),
)

MARS_B1: tuple[Term, ...] = (
    (350069.0, 5.368478, 3340.612427),
    (14116.0, 3.14159, 0.0),
    (9671.0, 5.4788, 6681.2249),
    (1472.0, 3.2021, 10021.8373),
    (426.0, 3.408, 13362.450),
    (102.0, 0.776, 3337.089),
    (79.0, 3.72, 16703.06),
    (33.0, 3.46, 5621.84),
    (26.0, 2.48, 2281.23),
)

MARS_B2: tuple[Term, ...] = (
    (16727.0, 0.60221, 3340.61243),
    (4987.0, 3.1416, 0.0),
    (302.0, 5.559, 6681.225),
    (26.0, 1.90, 13362.45),
    (21.0, 0.92, 10021.84),
    (12.0, 2.24, 3337.09),
    (8.0, 2.25, 16703.06),
)

MARS_B3: tuple[Term, ...] = (
    (607.0, 1.981, 3340.612),
    (43.0, 0.0, 0.0),
    (14.0, 1.80, 6681.22),
    (3.0, 3.45, 10021.84),
)

MARS_B4: tuple[Term, ...] = (
    (13.0, 0.0, 0.0),
    (11.0, 3.46, 3340.61),
    (1.0, 0.50, 6681.22),
)

MARS_R0: tuple[Term, ...] = (
    (153033488.0, 0.0, 0.0),
    (14184953.0, 3.47971284, 3340.61242670),
    (660776.0, 3.817834, 6681.224853),
    (46179.0, 4.15595, 10021.83728),
    (8110.0, 5.5596, 2810.9215),
    (7485.0, 1.7724, 5621.8429),
    (5523.0, 1.3644, 2281.2305),
    (3825.0, 4.4941, 13362.4497),
    (2484.0, 4.9255, 2942.4634),
    (2307.0, 0.0908, 2544.3144),
    (1999.0, 5.3606, 3337.0893),
    (1960.0, 4.7425, 3344.1355),
    (1167.0, 2.1126, 5092.1520),
    (1103.0, 5.0091, 398.1490),
    (992.0, 5.839, 6151.534),
    (899.0, 4.408, 529.691),
    (807.0, 2.102, 1059.382),
    (798.0, 3.448, 796.298),
    (741.0, 1.499, 2146.165),
    (726.0, 1.245, 8432.764),
    (692.0, 2.134, 8962.455),
    (633.0, 0.894, 3340.595),
    (633.0, 2.924, 3340.630),
    (630.0, 1.287, 1751.540),
    (574.0, 0.829, 2914.014),
    (526.0, 5.383, 3738.761),
    (473.0, 5.199, 3127.313),
    (348.0, 4.832, 16703.062),
    (284.0, 2.907, 3532.061),
    (280.0, 5.257, 6283.076),
    (276.0, 1.218, 6254.627),
    (275.0, 2.908, 1748.016),
    (270.0, 3.764, 5884.927),
    (239.0, 2.037, 1194.447),
    (234.0, 5.105, 5486.778),
    (228.0, 3.255, 6872.673),
    (223.0, 4.199, 3149.164),
    (219.0, 5.583, 191.448),
    (208.0, 5.255, 3340.545),
    (208.0, 4.846, 3340.680),
    (186.0, 5.699, 6677.702),
    (183.0, 5.081, 6684.748),
    (179.0, 4.184, 3333.499),
    (176.0, 5.953, 3870.303),
    (164.0, 3.799, 4136.910),
)

MARS_R1: tuple[Term, ...] = (
    (1107433.0, 2.0325052, 3340.6124267),
    (103176.0, 2.370718, 6681.224853),
    (12877.0, 0.0, 0.0),
    (10816.0, 2.70888, 10021.83728),
    (1195.0, 3.0470, 13362.4497),
    (439.0, 2.888, 2281.230),
    (396.0, 3.423, 3344.136),
    (183.0, 1.584, 2544.314),
    (136.0, 3.385, 16703.062),
    (128.0, 6.043, 3337.089),
    (128.0, 0.630, 1059.382),
    (127.0, 1.954, 796.298),
    (118.0, 2.998, 2146.165),
    (88.0, 3.42, 398.15),
    (83.0, 3.86, 3738.76),
    (76.0, 4.45, 6151.53),
    (72.0, 2.76, 529.69),
    (67.0, 2.55, 1751.54),
    (66.0, 4.41, 1748.02),
    (58.0, 0.54, 1194.45),
    (54.0, 0.68, 8962.46),
    (51.0, 3.73, 6684.75),
    (49.0, 5.73, 3340.60),
    (49.0, 1.48, 3340.63),
    (48.0, 2.58, 3149.16),
    (48.0, 2.29, 2914.01),
    (39.0, 2.32, 4136.91),
)

MARS_R2: tuple[Term, ...] = (
    (44242.0, 0.47931, 3340.61243),
    (8138.0, 0.8700, 6681.2249),
    (1275.0, 1.2259, 10021.8373),
    (187.0, 1.573, 13362.450),
    (52.0, 3.14, 0.0),
    (41.0, 1.97, 3344.14),
    (27.0, 1.92, 16703.06),
    (18.0, 4.43, 2281.23),
    (12.0, 4.53, 3185.19),
    (10.0, 5.39, 1059.38),
    (10.0, 0.42, 796.30),
)

MARS_R3: tuple[Term, ...] = (
    (1113.0, 5.1499, 3340.6124),
    (424.0, 5.613, 6681.225),
    (100.0, 5.997, 10021.837),
    (20.0, 0.08, 13362.45),
    (5.0, 3.14, 0.0),
    (3.0, 0.43, 16703.06),
)

MARS_R4: tuple[Term, ...] = (
    (20.0, 3.58, 3340.61),
    (16.0, 4.05, 6681.22),
    (6.0, 4.46, 10021.84),
    (2.0, 4.84, 13362.45),
)

JUPITER_L0: tuple[Term, ...] = (
    (59954691.0, 0.0, 0.0),
    (9695899.0, 5.0619179, 529.6909651),
    (573610.0, 1.444062, 7.113547),
    (306389.0, 5.417347, 1059.381930),
    (97178.0, 4.14265, 632.78374),
    (72903.0, 3.64043, 522.57742),
    (64264.0, 3.41145, 103.09277),
    (39806.0, 2.29377, 419.48464),
    (38858.0, 1.27232, 316.39187),
    (27965.0, 1.78455, 536.80451),
    (13590.0, 5.77481, 1589.07290),
    (8769.0, 3.6300, 949.1756),
    (8246.0, 3.5823, 206.1855),
    (7368.0, 5.0810, 735.8765),
    (6263.0, 0.0250, 213.2991),
    (6114.0, 4.5132, 1162.4747),
    (5305.0, 4.1863, 1052.2684),
    (5305.0, 1.3067, 14.2271),
    (4905.0, 1.3208, 110.2063),
    (4647.0, 4.6996, 3.9322),
    (3045.0, 4.3168, 426.5982),
    (2610.0, 1.5667, 846.0828),
    (2028.0, 1.0638, 3.1814),
    (1921.0, 0.9717, 639.8973),
    (1765.0, 2.1415, 1066.4955),
    (1723.0, 3.8804, 1265.5675),
    (1633.0, 3.5820, 515.4639),
    (1432.0, 4.2968, 625.6702),
    (973.0, 4.098, 95.979),
    (884.0, 2.437, 412.371),
    (733.0, 6.085, 838.969),
    (731.0, 3.806, 1581.959),
    (709.0, 1.293, 742.990),
    (692.0, 6.134, 2118.764),
    (614.0, 4.109, 1478.867),
    (582.0, 4.540, 309.278),
    (495.0, 3.756, 323.505),
    (441.0, 2.958, 454.909),
    (417.0, 1.036, 2.448),
    (390.0, 4.897, 1692.166),
    (376.0, 4.703, 1368.660),
    (341.0, 5.715, 533.623),
    (330.0, 4.740, 0.048),
    (262.0, 1.877, 0.963),
    (261.0, 0.820, 380.128),
    (257.0, 3.724, 199.072),
    (244.0, 5.220, 728.763),
    (235.0, 1.227, 909.819),
    (220.0, 1.651, 543.918),
    (207.0, 1.855, 525.759),
    (202.0, 1.807, 1375.774),
    (197.0, 5.293, 1155.361),
    (175.0, 3.730, 942.062),
    (175.0, 3.226, 1898.351),
    (175.0, 5.910, 956.289),
    (158.0, 4.365, 1795.258),
    (151.0, 3.906, 74.782),
    (149.0, 4.377, 1685.052),
    (141.0, 3.136, 491.558),
    (138.0, 1.318, 1169.588),
    (131.0, 4.169, 1045.155),
    (117.0, 2.500, 1596.186),
    (117.0, 3.389, 0.521),
    (106.0, 4.554, 526.510),
)

JUPITER_L1: tuple[Term, ...] = (
    (52993480757.0, 0.0, 0.0),
    (489741.0, 4.220667, 529.690965),
    (228919.0, 6.026475, 7.113547),
    (27655.0, 4.57266, 1059.38193),
    (20721.0, 5.45939, 522.57742),
    (12106.0, 0.16986, 536.80451),
    (6068.0, 4.4242, 103.0928),
    (5434.0, 3.9848, 419.4846),
    (4238.0, 5.8901, 14.2271),
    (2212.0, 5.2677, 206.1855),
    (1746.0, 4.9267, 1589.0729),
    (1296.0, 5.5513, 3.1814),
    (1173.0, 5.8565, 1052.2684),
    (1163.0, 0.5145, 3.9322),
    (1099.0, 5.3070, 515.4639),
    (1007.0, 0.4648, 735.8765),
    (1004.0, 3.1504, 426.5982),
    (848.0, 5.758, 110.206),
    (827.0, 4.803, 213.299),
    (816.0, 0.586, 1066.495),
    (725.0, 5.518, 639.897),
    (568.0, 5.989, 625.670),
    (474.0, 4.132, 412.371),
    (413.0, 5.737, 95.979),
    (345.0, 4.242, 632.784),
    (336.0, 3.732, 1162.475),
    (234.0, 4.035, 949.176),
    (234.0, 6.243, 309.278),
    (199.0, 1.505, 838.969),
    (195.0, 2.219, 323.505),
    (187.0, 6.086, 742.990),
    (184.0, 6.280, 543.918),
    (171.0, 5.417, 199.072),
    (131.0, 0.626, 728.763),
    (115.0, 0.680, 846.083),
    (115.0, 5.286, 2118.764),
    (108.0, 4.493, 956.289),
    (80.0, 5.82, 1045.15),
    (72.0, 5.34, 942.06),
    (70.0, 5.97, 532.87),
    (67.0, 5.73, 21.34),
    (66.0, 0.13, 526.51),
    (65.0, 6.09, 1581.96),
    (59.0, 0.59, 1155.36),
    (58.0, 0.99, 1596.19),
    (57.0, 5.97, 1169.59),
    (57.0, 1.41, 533.62),
    (55.0, 5.43, 10.29),
    (52.0, 5.73, 117.32),
    (52.0, 0.23, 1368.66),
    (50.0, 6.08, 525.76),
    (47.0, 3.63, 1478.87),
    (47.0, 0.51, 1265.57),
    (40.0, 4.16, 1692.17),
    (34.0, 0.10, 302.16),
    (33.0, 5.04, 220.41),
    (32.0, 5.37, 508.35),
    (29.0, 5.42, 1272.68),
    (29.0, 3.36, 4.67),
    (29.0, 0.76, 88.87),
    (25.0, 1.61, 831.86),
)

JUPITER_L2: tuple[Term, ...] = (
    (47234.0, 4.32148, 7.11355),
    (38966.0, 0.0, 0.0),
    (30629.0, 2.93021, 529.69097),
    (3189.0, 1.0550, 522.5774),
    (2729.0, 4.8455, 536.8045),
    (2723.0, 3.4141, 1059.3819),
    (1721.0, 4.1873, 14.2271),
    (383.0, 5.768, 419.485),
    (378.0, 0.760, 515.464),
    (367.0, 6.055, 103.093),
    (337.0, 3.786, 3.181),
    (308.0, 0.694, 206.186),
    (218.0, 3.814, 1589.073),
    (199.0, 5.340, 1066.495),
    (197.0, 2.484, 3.932),
    (156.0, 1.406, 1052.268),
    (146.0, 3.814, 639.897),
    (142.0, 1.634, 426.598),
    (130.0, 5.837, 412.371),
    (117.0, 1.414, 625.670),
    (97.0, 4.03, 110.21),
    (91.0, 1.11, 95.98),
    (87.0, 2.52, 632.78),
    (79.0, 4.64, 543.92),
    (72.0, 2.22, 735.88),
    (58.0, 0.83, 199.07),
    (57.0, 3.12, 213.30),
    (49.0, 1.67, 309.28),
    (40.0, 4.02, 21.34),
    (40.0, 0.62, 323.51),
    (36.0, 2.33, 728.76),
    (29.0, 3.61, 10.29),
    (28.0, 3.24, 838.97),
    (26.0, 4.50, 742.99),
    (26.0, 2.51, 1162.47),
    (25.0, 1.22, 1045.15),
    (24.0, 3.01, 956.29),
    (19.0, 4.29, 532.87),
    (18.0, 0.81, 508.35),
    (17.0, 4.20, 2118.76),
    (17.0, 1.83, 526.51),
    (15.0, 5.81, 1596.19),
    (15.0, 0.68, 942.06),
    (15.0, 4.00, 117.32),
    (14.0, 5.95, 316.39),
    (14.0, 1.80, 302.16),
    (13.0, 2.52, 88.87),
    (13.0, 4.37, 1169.59),
    (11.0, 4.44, 525.76),
    (10.0, 1.72, 1581.96),
    (9.0, 2.18, 1155.36),
    (9.0, 3.29, 220.41),
    (9.0, 3.32, 831.86),
    (8.0, 5.76, 846.08),
    (8.0, 2.71, 533.62),
    (7.0, 2.18, 1265.57),
    (6.0, 0.50, 949.18),
)

JUPITER_L3: tuple[Term, ...] = (
    (6502.0, 2.5986, 7.1135),
    (1357.0, 1.3464, 529.6910),
    (471.0, 2.475, 14.227),
    (417.0, 3.245, 536.805),
    (353.0, 2.974, 522.577),
    (155.0, 2.076, 1059.382),
    (87.0, 2.51, 515.46),
    (44.0, 0.0, 0.0),
    (34.0, 3.83, 1066.50),
    (28.0, 2.45, 206.19),
    (24.0, 1.28, 412.37),
    (23.0, 2.98, 543.92),
    (20.0, 2.10, 639.90),
    (20.0, 1.40, 419.48),
    (19.0, 1.59, 103.09),
    (17.0, 2.30, 21.34),
    (17.0, 2.60, 1589.07),
    (16.0, 3.15, 625.67),
    (16.0, 3.36, 1052.27),
    (13.0, 2.76, 95.98),
    (13.0, 2.54, 199.07),
    (13.0, 6.27, 426.60),
    (9.0, 1.76, 10.29),
    (9.0, 2.27, 110.21),
    (7.0, 3.43, 309.28),
    (7.0, 4.04, 728.76),
    (6.0, 2.52, 508.35),
    (5.0, 2.91, 1045.15),
    (5.0, 5.25, 323.51),
    (4.0, 4.30, 88.87),
    (4.0, 3.52, 302.16),
    (4.0, 4.09, 735.88),
    (3.0, 1.43, 956.29),
    (3.0, 4.36, 1596.19),
    (3.0, 1.25, 213.30),
    (3.0, 5.02, 838.97),
    (3.0, 2.24, 117.32),
    (2.0, 2.90, 742.99),
    (2.0, 2.36, 942.06),
)

JUPITER_L4: tuple[Term, ...] = (
    (669.0, 0.853, 7.114),
    (114.0, 3.142, 0.0),
    (100.0, 0.743, 14.227),
    (50.0, 1.65, 536.80),
    (44.0, 5.82, 529.69),
    (32.0, 4.86, 522.58),
    (15.0, 4.29, 515.46),
    (9.0, 0.71, 1059.38),
    (5.0, 1.30, 543.92),
    (4.0, 2.32, 1066.50),
    (4.0, 0.48, 21.34),
    (3.0, 3.00, 412.37),
    (2.0, 0.40, 639.90),
    (2.0, 4.26, 199.07),
    (2.0, 4.91, 625.67),
    (2.0, 4.26, 206.19),
    (1.0, 5.26, 1052.27),
    (1.0, 4.72, 95.98),
    (1.0, 1.29, 1589.07),
)

JUPITER_L5: tuple[Term, ...] = (
    (50.0, 5.26, 7.11),
    (16.0, 5.25, 14.23),
    (4.0, 0.01, 536.80),
    (2.0, 1.10, 522.58),
    (1.0, 3.14, 0.0),
)

JUPITER_B0: tuple[Term, ...] = (
    (2268616.0, 3.5585261, 529.6909651),
    (110090.0, 0.0, 0.0),
    (109972.0, 3.908093, 1059.381930),
    (8101.0, 3.6051, 522.5774),
    (6438.0, 0.3063, 536.8045),
    (6044.0, 4.2588, 1589.0729),
    (1107.0, 2.9853, 1162.4747),
    (944.0, 1.675, 426.598),
    (942.0, 2.936, 1052.268),
    (894.0, 1.754, 7.114),
    (836.0, 5.179, 103.093),
    (767.0, 2.155, 632.784),
    (684.0, 3.678, 213.299),
    (629.0, 0.643, 1066.495),
    (559.0, 0.014, 846.083),
    (532.0, 2.703, 110.206),
    (464.0, 1.173, 949.176),
    (431.0, 2.608, 419.485),
    (351.0, 4.611, 2118.764),
    (132.0, 4.778, 742.990),
    (123.0, 3.350, 1692.166),
    (116.0, 1.387, 323.505),
    (115.0, 5.049, 316.392),
    (104.0, 3.701, 515.464),
    (103.0, 2.319, 1478.867),
    (102.0, 3.153, 1581.959),
)

JUPITER_B1: tuple[Term, ...] = (
    (177352.0, 5.701665, 529.690965),
    (3230.0, 5.7794, 1059.3819),
    (3081.0, 5.4746, 522.5774),
    (2212.0, 4.7348, 536.8045),
    (1694.0, 3.1416, 0.0),
    (346.0, 4.746, 1052.268),
    (234.0, 5.189, 1066.495),
    (196.0, 6.186, 7.114),
    (150.0, 3.927, 1589.073),
    (114.0, 3.439, 632.784),
    (97.0, 2.91, 949.18),
    (82.0, 5.08, 1162.47),
    (77.0, 2.51, 103.09),
    (77.0, 0.61, 419.48),
    (74.0, 5.50, 515.46),
    (61.0, 5.45, 213.30),
    (50.0, 3.95, 735.88),
    (46.0, 0.54, 110.21),
    (45.0, 1.90, 846.08),
    (37.0, 4.70, 543.92),
    (36.0, 6.11, 316.39),
    (32.0, 4.92, 1581.96),
)

JUPITER_B2: tuple[Term, ...] = (
    (8094.0, 1.4632, 529.6910),
    (813.0, 3.1416, 0.0),
    (742.0, 0.957, 522.577),
    (399.0, 2.899, 536.805),
    (342.0, 1.447, 1059.382),
    (74.0, 0.41, 1052.27),
    (46.0, 3.48, 1066.50),
    (30.0, 1.93, 1589.07),
    (29.0, 0.99, 515.46),
    (23.0, 4.27, 7.11),
    (14.0, 2.92, 543.92),
    (12.0, 5.22, 632.78),
    (11.0, 4.88, 949.18),
    (6.0, 6.21, 1045.15),
)

JUPITER_B3: tuple[Term, ...] = (
    (252.0, 3.381, 529.691),
    (122.0, 2.733, 522.577),
    (49.0, 1.04, 536.81),
    (11.0, 2.31, 1052.27),
    (8.0, 2.77, 515.46),
    (7.0, 4.25, 1059.38),
    (6.0, 1.78, 1066.50),
    (4.0, 1.13, 543.92),
    (3.0, 3.14, 0.0),
)

JUPITER_B4: tuple[Term, ...] = (
    (15.0, 4.53, 522.58),
    (5.0, 4.47, 529.69),
    (4.0, 5.44, 536.81),
    (3.0, 0.0, 0.0),
    (2.0, 4.52, 515.46),
    (1.0, 4.20, 1052.27),
)

JUPITER_B5: tuple[Term, ...] = (
    (1.0, 0.09, 522.58),
)

JUPITER_R0: tuple[Term, ...] = (
    (520887429.0, 0.0, 0.0),
    (25209327.0, 3.49108640, 529.69096509),
    (610600.0, 3.841154, 1059.381930),
    (282029.0, 2.574199, 632.783739),
    (187647.0, 2.075904, 522.577418),
    (86793.0, 0.71001, 419.48464),
    (72063.0, 0.21466, 536.80451),
    (65517.0, 5.97996, 316.39187),
    (30135.0, 2.16132, 949.17561),
    (29135.0, 1.67759, 103.09277),
    (23947.0, 0.27458, 7.11355),
    (23453.0, 3.54023, 735.87651),
    (22284.0, 4.19363, 1589.07290),
    (13033.0, 2.96043, 1162.47470),
    (12749.0, 2.71550, 1052.26838),
    (9703.0, 1.9067, 206.1855),
    (9161.0, 4.4135, 213.2991),
    (7895.0, 2.4791, 426.5982),
    (7058.0, 2.1818, 1265.5675),
    (6138.0, 6.2642, 846.0828),
    (5477.0, 5.6573, 639.8973),
    (4170.0, 2.0161, 515.4639),
    (4137.0, 2.7222, 625.6702),
    (3503.0, 0.5653, 1066.4955),
    (2617.0, 2.0099, 1581.9593),
    (2500.0, 4.5518, 838.9693),
    (2128.0, 6.1275, 742.9901),
    (1912.0, 0.8562, 412.3711),
    (1611.0, 3.0887, 1368.6603),
    (1479.0, 2.6803, 1478.8666),
    (1231.0, 1.8904, 323.5054),
    (1217.0, 1.8017, 110.2063),
    (1015.0, 1.3867, 454.9094),
    (999.0, 2.872, 309.278),
    (961.0, 4.549, 2118.764),
    (886.0, 4.148, 533.623),
    (821.0, 1.593, 1898.351),
    (812.0, 5.941, 909.819),
    (777.0, 3.677, 728.763),
    (727.0, 3.988, 1155.361),
    (655.0, 2.791, 1685.052),
    (654.0, 3.382, 1692.166),
    (621.0, 4.823, 956.289),
    (615.0, 2.276, 942.062),
    (562.0, 0.081, 543.918),
    (542.0, 0.284, 525.759),
)

JUPITER_R1: tuple[Term, ...] = (
    (1271802.0, 2.6493751, 529.6909651),
    (61662.0, 3.00076, 1059.38193),
    (53444.0, 3.89718, 522.57742),
    (41390.0, 0.0, 0.0),
    (31185.0, 4.88277, 536.80451),
    (11847.0, 2.41330, 419.48464),
    (9166.0, 4.7598, 7.1135),
    (3404.0, 3.3469, 1589.0729),
    (3203.0, 5.2108, 735.8765),
    (3176.0, 2.7930, 103.0928),
    (2806.0, 3.7422, 515.4639),
    (2677.0, 4.3305, 1052.2684),
    (2600.0, 3.6344, 206.1855),
    (2412.0, 1.4695, 426.5982),
    (2101.0, 3.9276, 639.8973),
    (1646.0, 4.4163, 1066.4955),
    (1641.0, 4.4163, 625.6702),
    (1050.0, 3.1611, 213.2991),
    (1025.0, 2.5543, 412.3711),
    (806.0, 2.678, 632.784),
    (741.0, 2.171, 1162.475),
    (677.0, 6.250, 838.969),
    (567.0, 4.577, 742.990),
    (485.0, 2.469, 949.176),
    (469.0, 4.710, 543.918),
    (445.0, 0.403, 323.505),
    (416.0, 5.368, 728.763),
    (402.0, 4.605, 309.278),
    (347.0, 4.681, 14.227),
    (338.0, 3.168, 956.289),
    (261.0, 5.343, 846.083),
    (247.0, 3.923, 942.062),
    (220.0, 4.842, 1368.660),
    (203.0, 5.600, 1155.361),
    (200.0, 4.439, 1045.155),
    (197.0, 3.706, 2118.764),
    (196.0, 3.759, 199.072),
    (184.0, 4.265, 95.979),
    (180.0, 4.402, 532.872),
    (170.0, 4.846, 526.510),
    (146.0, 6.130, 533.623),
    (133.0, 1.322, 110.206),
    (132.0, 4.512, 525.759),
)

JUPITER_R2: tuple[Term, ...] = (
    (79645.0, 1.35866, 529.69097),
    (8252.0, 5.7777, 522.5774),
    (7030.0, 3.2748, 536.8045),
    (5314.0, 1.8384, 1059.3819),
    (1861.0, 2.9768, 7.1135),
    (964.0, 5.480, 515.464),
    (836.0, 4.199, 419.485),
    (498.0, 3.142, 0.0),
    (427.0, 2.228, 639.897),
    (406.0, 3.783, 1066.495),
    (377.0, 2.242, 1589.073),
    (363.0, 5.368, 206.186),
    (342.0, 6.099, 1052.268),
    (339.0, 6.127, 625.670),
    (333.0, 0.003, 426.598),
    (280.0, 4.262, 412.371),
    (257.0, 0.963, 632.784),
    (230.0, 0.705, 735.877),
    (201.0, 3.069, 543.918),
    (200.0, 4.429, 103.093),
    (139.0, 2.932, 14.227),
    (114.0, 0.787, 728.763),
    (95.0, 1.70, 838.97),
    (86.0, 5.14, 323.51),
    (83.0, 0.06, 309.28),
    (80.0, 2.98, 742.99),
    (75.0, 1.60, 956.29),
    (70.0, 1.51, 213.30),
    (67.0, 5.47, 199.07),
    (62.0, 6.10, 1045.15),
    (56.0, 0.96, 1162.47),
    (52.0, 5.58, 942.06),
    (50.0, 2.72, 532.87),
    (45.0, 5.52, 508.35),
    (44.0, 0.27, 526.51),
    (40.0, 5.95, 95.98),
)

JUPITER_R3: tuple[Term, ...] = (
    (3519.0, 6.0580, 529.6910),
    (1073.0, 1.6732, 536.8045),
    (916.0, 1.413, 522.577),
    (342.0, 0.523, 1059.382),
    (255.0, 1.196, 7.114),
    (222.0, 0.952, 515.464),
    (90.0, 3.14, 0.0),
    (69.0, 2.27, 1066.50),
    (58.0, 1.41, 543.92),
    (58.0, 0.53, 639.90),
    (51.0, 5.98, 412.37),
    (47.0, 1.58, 625.67),
    (43.0, 6.12, 419.48),
    (37.0, 1.18, 14.23),
    (34.0, 1.67, 1052.27),
    (34.0, 0.85, 206.19),
    (31.0, 1.04, 1589.07),
    (30.0, 4.63, 426.60),
    (21.0, 2.50, 728.76),
    (15.0, 0.89, 199.07),
    (14.0, 0.96, 508.35),
    (13.0, 1.50, 1045.15),
    (12.0, 2.61, 735.88),
    (12.0, 3.56, 323.51),
    (11.0, 1.79, 309.28),
    (11.0, 6.28, 956.29),
    (10.0, 6.26, 103.09),
    (9.0, 3.45, 838.97),
)

JUPITER_R4: tuple[Term, ...] = (
    (129.0, 0.084, 536.805),
    (113.0, 4.249, 529.691),
    (83.0, 3.30, 522.58),
    (38.0, 2.73, 515.46),
    (27.0, 5.69, 7.11),
    (18.0, 5.40, 1059.38),
    (13.0, 6.02, 543.92),
    (9.0, 0.77, 1066.50),
    (8.0, 5.68, 14.23),
    (7.0, 1.43, 412.37),
    (6.0, 5.12, 639.90),
    (5.0, 3.34, 625.67),
    (3.0, 3.40, 1052.27),
    (3.0, 4.16, 728.76),
    (3.0, 2.90, 426.60),
)

JUPITER_R5: tuple[Term, ...] = (
    (11.0, 4.75, 536.80),
    (4.0, 5.92, 522.58),
    (2.0, 5.57, 515.46),
    (2.0, 4.30, 543.92),
    (2.0, 3.69, 7.11),
    (2.0, 4.13, 1059.38),
    (2.0, 5.49, 1066.50),
)

SATURN_L0: tuple[Term, ...] = (
    (87401354.0, 0.0, 0.0),
    (11107660.0, 3.96205090, 213.29909544),
    (1414151.0, 4.5858152, 7.1135470),
    (398379.0, 0.521120, 206.185548),
    (350769.0, 3.303299, 426.598191),
    (206816.0, 0.246584, 103.092774),
    (79271.0, 3.84007, 220.41264),
    (23990.0, 4.66977, 110.20632),
    (16574.0, 0.43719, 419.48464),
    (15820.0, 0.93809, 632.78374),
    (15054.0, 2.71670, 639.89729),
    (14907.0, 5.76903, 316.39187),
    (14610.0, 1.56519, 3.93215),
    (13160.0, 4.44891, 14.22709),
    (13005.0, 5.98119, 11.04570),
    (10725.0, 3.12940, 202.25340),
    (6126.0, 1.7633, 277.0350),
    (5863.0, 0.2366, 529.6910),
    (5228.0, 4.2078, 3.1814),
    (5020.0, 3.1779, 433.7117),
    (4593.0, 0.6198, 199.0720),
    (4006.0, 2.2448, 63.7359),
    (3874.0, 3.2228, 138.5175),
    (3269.0, 0.7749, 949.1756),
    (2954.0, 0.9828, 95.9792),
    (2461.0, 2.0316, 735.8765),
    (1758.0, 3.2658, 522.5774),
    (1640.0, 5.5050, 846.0828),
    (1581.0, 4.3727, 309.2783),
    (1391.0, 4.0233, 323.5054),
    (1124.0, 2.8373, 415.5525),
    (1087.0, 4.1834, 2.4477),
    (1017.0, 3.7170, 227.5262),
    (957.0, 0.507, 1265.567),
    (853.0, 3.421, 175.166),
    (849.0, 3.191, 209.367),
    (789.0, 5.007, 0.963),
    (749.0, 2.144, 853.196),
    (744.0, 5.253, 224.345),
    (687.0, 1.747, 1052.268),
    (654.0, 1.599, 0.048),
    (634.0, 2.299, 412.371),
    (625.0, 0.970, 210.118),
    (580.0, 3.093, 74.782),
    (546.0, 2.127, 350.332),
    (543.0, 1.518, 9.561),
    (530.0, 4.449, 117.320),
    (478.0, 2.965, 137.033),
    (474.0, 5.475, 742.990),
    (452.0, 1.044, 490.334),
    (449.0, 1.290, 127.472),
    (372.0, 2.278, 217.231),
    (355.0, 3.013, 838.969),
    (347.0, 1.539, 340.771),
    (343.0, 0.246, 0.521),
    (330.0, 0.247, 1581.959),
    (322.0, 0.961, 203.738),
    (322.0, 2.572, 647.011),
    (309.0, 3.495, 216.480),
    (287.0, 2.370, 351.817),
    (278.0, 0.400, 211.815),
    (249.0, 1.470, 1368.660),
    (227.0, 4.910, 12.530),
    (220.0, 4.204, 200.769),
    (209.0, 1.345, 625.670),
    (208.0, 0.483, 1162.475),
    (208.0, 1.283, 39.357),
    (204.0, 6.011, 265.989),
    (185.0, 3.503, 149.563),
    (184.0, 0.973, 4.193),
    (182.0, 5.491, 2.921),
    (174.0, 1.863, 0.751),
    (165.0, 0.440, 5.417),
    (149.0, 5.736, 52.690),
    (148.0, 1.535, 5.629),
    (146.0, 6.231, 195.140),
    (140.0, 4.295, 21.341),
    (131.0, 4.068, 10.295),
    (125.0, 6.277, 1898.351),
    (122.0, 1.976, 4.666),
    (118.0, 5.341, 554.070),
    (117.0, 2.679, 1155.361),
    (114.0, 5.594, 1059.382),
    (112.0, 1.105, 191.208),
    (110.0, 0.166, 1.484),
    (109.0, 3.438, 536.805),
    (107.0, 4.012, 956.289),
    (104.0, 2.192, 88.866),
    (103.0, 1.197, 1685.052),
    (101.0, 4.965, 269.921),
)

SATURN_L1: tuple[Term, ...] = (
    (21354295596.0, 0.0, 0.0),
    (1296855.0, 1.8282054, 213.2990954),
    (564348.0, 2.885001, 7.113547),
    (107679.0, 2.277699, 206.185548),
    (98323.0, 1.08070, 426.59819),
    (40255.0, 2.04128, 220.41264),
    (19942.0, 1.27955, 103.09277),
    (10512.0, 2.74880, 14.22709),
    (6939.0, 0.4049, 639.8973),
    (4803.0, 2.4419, 419.4846),
    (4056.0, 2.9217, 110.2063),
    (3769.0, 3.6497, 3.9322),
    (3385.0, 2.4169, 3.1814),
    (3302.0, 1.2626, 433.7117),
    (3071.0, 2.3274, 199.0720),
    (1953.0, 3.5639, 11.0457),
    (1249.0, 2.6280, 95.9792),
    (922.0, 1.961, 227.526),
    (706.0, 4.417, 529.691),
    (650.0, 6.174, 202.253),
    (628.0, 6.111, 309.278),
    (487.0, 6.040, 853.196),
    (479.0, 4.988, 522.577),
    (468.0, 4.617, 63.736),
    (417.0, 2.117, 323.505),
    (408.0, 1.299, 209.367),
    (352.0, 2.317, 632.784),
    (344.0, 3.959, 412.371),
    (340.0, 3.634, 316.392),
    (336.0, 3.772, 735.877),
    (332.0, 2.861, 210.118),
    (289.0, 2.733, 117.320),
    (281.0, 5.744, 2.448),
    (266.0, 0.543, 647.011),
    (230.0, 1.644, 216.480),
    (192.0, 2.965, 224.345),
    (173.0, 4.077, 846.083),
    (167.0, 2.597, 21.341),
    (136.0, 2.286, 10.295),
    (131.0, 3.441, 742.990),
    (128.0, 4.095, 217.231),
    (109.0, 6.161, 415.552),
    (98.0, 4.73, 838.97),
    (94.0, 3.48, 1052.27),
    (92.0, 3.95, 88.87),
    (87.0, 1.22, 440.83),
    (83.0, 3.11, 625.67),
    (78.0, 6.24, 302.16),
    (67.0, 0.29, 4.67),
    (66.0, 5.65, 9.56),
    (62.0, 4.29, 127.47),
    (62.0, 1.83, 195.14),
    (58.0, 2.48, 191.96),
    (57.0, 5.02, 137.03),
    (55.0, 0.28, 74.78),
    (54.0, 5.13, 490.33),
    (51.0, 1.46, 536.80),
    (47.0, 1.18, 149.56),
    (47.0, 5.15, 515.46),
    (46.0, 2.23, 956.29),
    (44.0, 2.71, 5.42),
    (40.0, 0.41, 269.92),
    (37.0, 3.78, 2.92),
    (33.0, 3.21, 1265.57),
    (33.0, 3.42, 1.48),
    (28.0, 4.56, 1.34),
    (28.0, 6.27, 280.97),
    (26.0, 2.00, 0.96),
    (26.0, 3.37, 4.19),
    (24.0, 4.62, 1.93),
    (23.0, 1.94, 0.17),
    (23.0, 5.96, 4.59),
)

SATURN_L2: tuple[Term, ...] = (
    (116441.0, 1.179879, 7.113547),
    (91921.0, 0.07425, 213.29910),
    (90592.0, 0.0, 0.0),
    (15277.0, 4.06492, 206.18555),
    (10631.0, 0.25778, 220.41264),
    (10605.0, 5.40964, 426.59819),
    (4265.0, 1.0460, 14.2271),
    (1216.0, 2.9186, 103.0928),
    (1165.0, 4.6094, 639.8973),
    (1082.0, 5.6913, 433.7117),
    (1045.0, 4.0421, 199.0720),
    (1020.0, 0.6337, 3.1814),
    (634.0, 4.388, 419.485),
    (549.0, 5.573, 3.932),
    (457.0, 1.268, 110.206),
    (425.0, 0.209, 227.526),
    (274.0, 4.288, 95.979),
    (162.0, 1.381, 11.046),
    (129.0, 1.566, 309.278),
    (117.0, 3.881, 853.196),
    (105.0, 4.900, 647.011),
    (101.0, 0.893, 21.341),
    (96.0, 2.91, 316.39),
    (95.0, 5.63, 412.37),
    (85.0, 5.73, 209.37),
    (83.0, 6.05, 216.48),
    (82.0, 1.02, 117.32),
    (75.0, 4.76, 210.12),
    (67.0, 0.46, 522.58),
    (66.0, 0.48, 10.29),
    (64.0, 0.35, 323.51),
    (61.0, 4.88, 632.78),
    (53.0, 2.75, 529.69),
    (46.0, 5.69, 440.83),
    (45.0, 1.67, 202.25),
    (42.0, 5.71, 88.87),
    (32.0, 0.07, 63.74),
    (32.0, 1.67, 302.16),
    (31.0, 4.16, 191.96),
    (27.0, 0.83, 224.34),
    (25.0, 5.66, 735.88),
    (20.0, 5.94, 217.23),
    (18.0, 4.90, 625.67),
    (17.0, 1.63, 742.99),
    (16.0, 0.58, 515.46),
    (14.0, 0.21, 838.97),
    (14.0, 3.76, 195.14),
    (12.0, 4.72, 203.00),
    (12.0, 0.13, 234.64),
    (12.0, 3.12, 846.08),
    (11.0, 5.92, 536.80),
    (11.0, 5.60, 728.76),
    (11.0, 3.20, 1066.50),
    (10.0, 4.99, 422.67),
    (10.0, 0.26, 330.62),
    (10.0, 4.15, 860.31),
    (9.0, 0.46, 956.29),
    (8.0, 2.14, 269.92),
    (8.0, 5.25, 429.78),
    (8.0, 4.03, 9.56),
    (7.0, 5.40, 1052.27),
    (6.0, 4.46, 284.15),
    (6.0, 5.93, 405.26),
)

SATURN_L3: tuple[Term, ...] = (
    (16039.0, 5.73945, 7.11355),
    (4250.0, 4.5854, 213.2991),
    (1907.0, 4.7608, 220.4126),
    (1466.0, 5.9133, 206.1855),
    (1162.0, 5.6197, 14.2271),
    (1067.0, 3.6082, 426.5982),
    (239.0, 3.861, 433.712),
    (237.0, 5.768, 199.072),
    (166.0, 5.116, 3.181),
    (151.0, 2.736, 639.897),
    (131.0, 4.743, 227.526),
    (63.0, 0.23, 419.48),
    (62.0, 4.74, 103.09),
    (40.0, 5.47, 21.34),
    (40.0, 5.96, 95.98),
    (39.0, 5.83, 110.21),
    (28.0, 3.01, 647.01),
    (25.0, 0.99, 3.93),
    (19.0, 1.92, 853.20),
    (18.0, 4.97, 10.29),
    (18.0, 1.03, 412.37),
    (18.0, 4.20, 216.48),
    (18.0, 3.32, 309.28),
    (16.0, 3.90, 440.83),
    (16.0, 5.62, 117.32),
    (13.0, 1.18, 88.87),
    (11.0, 5.58, 11.05),
    (11.0, 5.93, 191.96),
    (10.0, 3.95, 209.37),
    (9.0, 3.39, 302.16),
    (8.0, 4.88, 323.51),
    (7.0, 0.38, 632.78),
    (6.0, 2.25, 522.58),
    (6.0, 1.06, 210.12),
    (5.0, 4.64, 234.64),
    (4.0, 3.14, 0.0),
    (4.0, 2.31, 515.46),
    (3.0, 2.20, 860.31),
    (3.0, 0.59, 529.69),
    (3.0, 4.93, 224.34),
    (3.0, 0.42, 625.67),
    (2.0, 4.77, 330.62),
    (2.0, 3.35, 429.78),
    (2.0, 3.20, 202.25),
    (2.0, 1.19, 1066.50),
    (2.0, 1.35, 405.26),
    (2.0, 4.16, 223.59),
    (2.0, 3.07, 654.12),
)

SATURN_L4: tuple[Term, ...] = (
    (1662.0, 3.9983, 7.1135),
    (257.0, 2.984, 220.413),
    (236.0, 3.902, 14.227),
    (149.0, 2.741, 213.299),
    (114.0, 3.142, 0.0),
    (110.0, 1.515, 206.186),
    (68.0, 1.72, 426.60),
    (40.0, 2.05, 433.71),
    (38.0, 1.24, 199.07),
    (31.0, 3.01, 227.53),
    (15.0, 0.83, 639.90),
    (9.0, 3.71, 21.34),
    (6.0, 2.42, 419.48),
    (6.0, 1.16, 647.01),
    (6.0, 1.45, 95.98),
    (5.0, 2.12, 440.83),
    (5.0, 1.41, 110.21),
    (4.0, 4.15, 117.32),
    (4.0, 2.77, 412.37),
    (3.0, 1.56, 3.18),
    (3.0, 2.21, 10.29),
    (3.0, 5.77, 853.20),
    (2.0, 4.28, 302.16),
    (2.0, 3.46, 216.48),
    (2.0, 1.44, 323.51),
    (2.0, 5.71, 309.28),
    (2.0, 0.65, 3.93),
    (1.0, 2.21, 191.96),
)

SATURN_L5: tuple[Term, ...] = (
    (124.0, 2.259, 7.114),
    (34.0, 2.16, 14.23),
    (28.0, 1.20, 220.41),
    (6.0, 1.22, 227.53),
    (5.0, 0.24, 433.71),
    (4.0, 6.23, 426.60),
    (3.0, 2.97, 199.07),
    (3.0, 4.29, 206.19),
    (2.0, 6.25, 213.30),
    (1.0, 5.28, 639.90),
    (1.0, 0.24, 440.83),
    (1.0, 3.14, 0.0),
)

SATURN_B0: tuple[Term, ...] = (
    (4330678.0, 3.6028443, 213.2990954),
    (240348.0, 2.852385, 426.598191),
    (84746.0, 0.0, 0.0),
    (34116.0, 0.57297, 206.18555),
    (30863.0, 3.48442, 220.41264),
    (14734.0, 2.11847, 639.89729),
    (9917.0, 5.7900, 419.4846),
    (6994.0, 4.7360, 7.1135),
    (4808.0, 5.4331, 316.3919),
    (4788.0, 4.9651, 110.2063),
    (3432.0, 2.7326, 433.7117),
    (1506.0, 6.0130, 103.0928),
    (1060.0, 5.6310, 529.6910),
    (969.0, 5.204, 632.784),
    (942.0, 1.396, 853.196),
    (708.0, 3.803, 323.505),
    (552.0, 5.131, 202.253),
    (400.0, 3.359, 227.526),
    (319.0, 3.626, 209.367),
    (316.0, 1.997, 647.011),
    (314.0, 0.465, 217.231),
    (284.0, 4.886, 224.345),
    (236.0, 2.139, 11.046),
    (215.0, 5.950, 846.083),
    (209.0, 2.120, 415.552),
    (207.0, 0.730, 199.072),
    (179.0, 2.954, 63.736),
    (141.0, 0.644, 490.334),
    (139.0, 4.595, 14.227),
    (139.0, 1.998, 735.877),
    (135.0, 5.245, 742.990),
    (122.0, 3.115, 522.577),
    (116.0, 3.109, 216.480),
    (114.0, 0.963, 210.118),
)

SATURN_B1: tuple[Term, ...] = (
    (397555.0, 5.332900, 213.299095),
    (49479.0, 3.14159, 0.0),
    (18572.0, 6.09919, 426.59819),
    (14801.0, 2.30586, 206.18555),
    (9644.0, 1.6967, 220.4126),
    (3757.0, 1.2543, 419.4846),
    (2717.0, 5.9117, 639.8973),
    (1455.0, 0.8516, 433.7117),
    (1291.0, 2.9177, 7.1135),
    (853.0, 0.436, 316.392),
    (298.0, 0.919, 632.784),
    (292.0, 5.316, 853.196),
    (284.0, 1.619, 227.526),
    (275.0, 3.889, 103.093),
    (172.0, 0.052, 647.011),
    (166.0, 2.444, 199.072),
    (158.0, 5.209, 110.206),
    (128.0, 1.207, 529.691),
    (110.0, 2.457, 217.231),
    (82.0, 2.76, 210.12),
    (81.0, 2.86, 14.23),
    (69.0, 1.66, 202.25),
    (65.0, 1.26, 216.48),
    (61.0, 1.25, 209.37),
    (59.0, 1.82, 323.51),
    (46.0, 0.82, 440.83),
    (36.0, 1.82, 224.34),
    (34.0, 2.84, 117.32),
    (33.0, 1.31, 412.37),
    (32.0, 1.19, 846.08),
    (27.0, 4.65, 1066.50),
    (27.0, 4.44, 11.05),
)

SATURN_B2: tuple[Term, ...] = (
    (20630.0, 0.50482, 213.29910),
    (3720.0, 3.9983, 206.1855),
    (1627.0, 6.1819, 220.4126),
    (1346.0, 0.0, 0.0),
    (706.0, 3.039, 419.485),
    (365.0, 5.099, 426.598),
    (330.0, 5.279, 433.712),
    (219.0, 3.828, 639.897),
    (139.0, 1.043, 7.114),
    (104.0, 6.157, 227.526),
    (93.0, 1.98, 316.39),
    (71.0, 4.15, 199.07),
    (52.0, 2.88, 632.78),
    (49.0, 4.43, 647.01),
    (41.0, 3.16, 853.20),
    (29.0, 4.53, 210.12),
    (24.0, 1.12, 14.23),
    (21.0, 4.35, 217.23),
    (20.0, 5.31, 440.83),
    (18.0, 0.85, 110.21),
    (17.0, 5.68, 216.48),
    (16.0, 4.26, 103.09),
    (14.0, 3.00, 412.37),
    (12.0, 2.53, 529.69),
    (8.0, 3.32, 202.25),
    (7.0, 5.56, 209.37),
    (7.0, 0.29, 323.51),
    (6.0, 1.16, 117.32),
    (6.0, 3.61, 860.31),
)

SATURN_B3: tuple[Term, ...] = (
    (666.0, 1.990, 213.299),
    (632.0, 5.698, 206.186),
    (398.0, 0.0, 0.0),
    (188.0, 4.338, 220.413),
    (92.0, 4.84, 419.48),
    (52.0, 3.42, 433.71),
    (42.0, 2.38, 426.60),
    (26.0, 4.40, 227.53),
    (21.0, 5.85, 199.07),
    (18.0, 1.99, 639.90),
    (11.0, 5.37, 7.11),
    (10.0, 2.44, 440.83),
    (7.0, 2.46, 216.48),
    (6.0, 4.95, 647.01),
    (5.0, 2.66, 853.20),
    (5.0, 5.37, 210.12),
    (4.0, 4.32, 632.78),
)

SATURN_B4: tuple[Term, ...] = (
    (80.0, 1.12, 206.19),
    (32.0, 3.12, 213.30),
    (17.0, 2.48, 220.41),
    (12.0, 3.14, 0.0),
    (9.0, 0.38, 419.48),
    (6.0, 1.56, 433.71),
    (5.0, 2.63, 227.53),
    (5.0, 1.28, 199.07),
    (1.0, 1.44, 426.60),
    (1.0, 0.67, 647.01),
    (1.0, 1.72, 440.83),
    (1.0, 6.18, 639.90),
)

SATURN_B5: tuple[Term, ...] = (
    (8.0, 2.82, 206.19),
    (1.0, 0.51, 220.41),
)

SATURN_R0: tuple[Term, ...] = (
    (955758136.0, 0.0, 0.0),
    (52921382.0, 2.39226220, 213.29909544),
    (1873680.0, 5.2354961, 206.1855484),
    (1464664.0, 1.6476305, 426.5981909),
    (821891.0, 5.935200, 316.391870),
    (547507.0, 5.015326, 103.092774),
    (371684.0, 2.271148, 220.412642),
    (361778.0, 3.139043, 7.113547),
    (140618.0, 5.704067, 632.783739),
    (108975.0, 3.293136, 110.206321),
    (69007.0, 5.94100, 419.48464),
    (61053.0, 0.94038, 639.89729),
    (48913.0, 1.55733, 202.25340),
    (34144.0, 0.19519, 277.03499),
    (32402.0, 5.47085, 949.17561),
    (20937.0, 0.46349, 735.87651),
    (20839.0, 1.52103, 433.71174),
    (20747.0, 5.33256, 199.07200),
    (15298.0, 3.05944, 529.69097),
    (14296.0, 2.60434, 323.50542),
    (12884.0, 1.64892, 138.51750),
    (11993.0, 5.98051, 846.08283),
    (11380.0, 1.73106, 522.57742),
    (9796.0, 5.2048, 1265.5675),
    (7753.0, 5.8519, 95.9792),
    (6771.0, 3.0043, 14.2271),
    (6466.0, 0.1773, 1052.2684),
    (5850.0, 1.4552, 415.5525),
    (5307.0, 0.5974, 63.7359),
    (4696.0, 2.1492, 227.5262),
    (4044.0, 1.6401, 209.3669),
    (3688.0, 0.7802, 412.3711),
    (3461.0, 1.8509, 175.1661),
    (3420.0, 4.9455, 1581.9593),
    (3401.0, 0.5539, 350.3321),
    (3376.0, 3.6953, 224.3448),
    (2976.0, 5.6847, 210.1177),
    (2885.0, 1.3876, 838.9693),
    (2881.0, 0.1796, 853.1964),
    (2508.0, 3.5385, 742.9901),
    (2448.0, 6.1841, 1368.6603),
    (2406.0, 2.9656, 117.3199),
    (2174.0, 0.0151, 340.7709),
    (2024.0, 5.0541, 11.0457),
)

SATURN_R1: tuple[Term, ...] = (
    (6182981.0, 0.2584352, 213.2990954),
    (506578.0, 0.711147, 206.185548),
    (341394.0, 5.796358, 426.598191),
    (188491.0, 0.472157, 220.412642),
    (186262.0, 3.141593, 0.0),
    (143891.0, 1.407449, 7.113547),
    (49621.0, 6.01744, 103.09277),
    (20928.0, 5.09246, 639.89729),
    (19953.0, 1.17560, 419.48464),
    (18840.0, 1.60820, 110.20632),
    (13877.0, 0.75886, 199.07200),
    (12893.0, 5.94330, 433.71174),
    (5397.0, 1.2885, 14.2271),
    (4869.0, 0.8679, 323.5054),
    (4247.0, 0.3930, 227.5262),
    (3252.0, 1.2585, 95.9792),
    (3081.0, 3.4366, 522.5774),
    (2909.0, 4.6068, 202.2534),
    (2856.0, 2.1673, 735.8765),
    (1988.0, 2.4505, 412.3711),
    (1941.0, 6.0239, 209.3669),
    (1581.0, 1.2919, 210.1177),
    (1340.0, 4.3080, 853.1964),
    (1316.0, 1.2530, 117.3199),
    (1203.0, 1.8665, 316.3919),
    (1091.0, 0.0753, 216.4805),
    (966.0, 0.480, 632.784),
    (954.0, 5.152, 647.011),
    (898.0, 0.983, 529.691),
    (882.0, 1.885, 1052.268),
    (874.0, 1.402, 224.345),
    (785.0, 3.064, 838.969),
    (740.0, 1.382, 625.670),
    (658.0, 4.144, 309.278),
    (650.0, 1.725, 742.990),
    (613.0, 3.033, 63.736),
    (599.0, 2.549, 217.231),
    (503.0, 2.130, 3.932),
)

SATURN_R2: tuple[Term, ...] = (
    (436902.0, 4.786717, 213.299095),
    (71923.0, 2.50070, 206.18555),
    (49767.0, 4.97168, 220.41264),
    (43221.0, 3.86940, 426.59819),
    (29646.0, 5.96310, 7.11355),
    (4721.0, 2.4753, 199.0720),
    (4142.0, 4.1067, 433.7117),
    (3789.0, 3.0977, 639.8973),
    (2964.0, 1.3721, 103.0928),
    (2556.0, 2.8507, 419.4846),
    (2327.0, 0.0, 0.0),
    (2208.0, 6.2759, 110.2063),
    (2188.0, 5.8555, 14.2271),
    (1957.0, 4.9245, 227.5262),
    (924.0, 5.464, 323.505),
    (706.0, 2.971, 95.979),
    (546.0, 4.129, 412.371),
    (431.0, 5.178, 522.577),
    (405.0, 4.173, 209.367),
    (391.0, 4.481, 216.480),
    (374.0, 5.834, 117.320),
    (361.0, 3.277, 647.011),
    (356.0, 3.192, 210.118),
    (326.0, 2.269, 853.196),
    (207.0, 4.022, 735.877),
    (204.0, 0.088, 202.253),
    (180.0, 3.597, 632.784),
    (178.0, 4.097, 440.825),
    (154.0, 3.135, 625.670),
    (148.0, 0.136, 302.165),
    (133.0, 2.594, 191.958),
    (132.0, 5.933, 309.278),
)

SATURN_R3: tuple[Term, ...] = (
    (20315.0, 3.02187, 213.29910),
    (8924.0, 3.1914, 220.4126),
    (6909.0, 4.3517, 206.1855),
    (4087.0, 4.2241, 7.1135),
    (3879.0, 2.0106, 426.5982),
    (1071.0, 4.2036, 199.0720),
    (907.0, 2.283, 433.712),
    (606.0, 3.175, 227.526),
    (597.0, 4.135, 14.227),
    (483.0, 1.173, 639.897),
    (393.0, 0.0, 0.0),
    (229.0, 4.698, 419.485),
    (188.0, 4.590, 110.206),
    (150.0, 3.202, 103.093),
    (121.0, 3.768, 323.505),
    (102.0, 4.710, 95.979),
    (101.0, 5.819, 412.371),
    (93.0, 1.44, 647.01),
    (84.0, 2.63, 216.48),
    (73.0, 4.15, 117.32),
    (62.0, 2.31, 440.83),
    (56.0, 3.86, 210.12),
)

SATURN_R4: tuple[Term, ...] = (
    (1202.0, 1.4150, 220.4126),
    (708.0, 1.162, 213.299),
    (516.0, 6.240, 206.186),
    (427.0, 2.469, 7.114),
    (268.0, 0.187, 426.598),
    (170.0, 5.959, 199.072),
    (150.0, 0.480, 433.712),
    (145.0, 1.442, 227.526),
    (121.0, 2.405, 14.227),
    (47.0, 5.57, 639.90),
    (19.0, 5.86, 647.01),
    (17.0, 0.53, 440.83),
    (16.0, 2.90, 110.21),
    (15.0, 0.30, 419.48),
    (14.0, 1.30, 412.37),
    (13.0, 2.09, 323.51),
    (11.0, 0.22, 95.98),
    (11.0, 2.46, 117.32),
    (10.0, 3.14, 0.0),
    (9.0, 1.56, 88.87),
    (9.0, 2.28, 21.34),
    (9.0, 0.68, 216.48),
    (8.0, 1.27, 234.64),
)

SATURN_R5: tuple[Term, ...] = (
    (129.0, 5.913, 220.413),
    (32.0, 0.69, 7.11),
    (27.0, 5.91, 227.53),
    (20.0, 4.95, 433.71),
    (20.0, 0.67, 14.23),
    (14.0, 2.67, 206.19),
    (14.0, 1.46, 199.07),
    (13.0, 4.59, 426.60),
    (7.0, 4.63, 213.30),
    (5.0, 3.61, 639.90),
    (4.0, 4.90, 440.83),
    (3.0, 4.07, 647.01),
    (3.0, 4.66, 191.96),
    (3.0, 0.49, 323.51),
    (3.0, 3.18, 419.48),
    (2.0, 3.70, 88.87),
    (2.0, 3.32, 95.98),
    (2.0, 0.56, 117.32),
)

URANUS_L0: tuple[Term, ...] = (
    (548129294.0, 0.0, 0.0),
    (9260408.0, 0.8910642, 74.7815986),
    (1504248.0, 3.6271926, 1.4844727),
    (365982.0, 1.899622, 73.297126),
    (272328.0, 3.358237, 149.563197),
    (70328.0, 5.39254, 63.73590),
    (68893.0, 6.09292, 76.26607),
    (61999.0, 2.26952, 2.96895),
    (61951.0, 2.85099, 11.04570),
    (26469.0, 3.14152, 71.81265),
    (25711.0, 6.11380, 454.90937),
    (21079.0, 4.36059, 148.07872),
    (17819.0, 1.74437, 36.64856),
    (14613.0, 4.73732, 3.93215),
    (11163.0, 5.82682, 224.34480),
    (10998.0, 0.48865, 138.51750),
    (9527.0, 2.9552, 35.1641),
    (7546.0, 5.2363, 109.9457),
    (4220.0, 3.2333, 70.8494),
    (4052.0, 2.2775, 151.0477),
    (3490.0, 5.4831, 146.5943),
    (3355.0, 1.0655, 4.4534),
    (3144.0, 4.7520, 77.7505),
    (2927.0, 4.6290, 9.5612),
    (2922.0, 5.3524, 85.8273),
    (2273.0, 4.3660, 70.3282),
    (2149.0, 0.6075, 38.1330),
    (2051.0, 1.5177, 0.1119),
    (1992.0, 4.9244, 277.0350),
    (1667.0, 3.6274, 380.1278),
    (1533.0, 2.5859, 52.6902),
    (1376.0, 2.0428, 65.2204),
    (1372.0, 4.1964, 111.4302),
    (1284.0, 3.1135, 202.2534),
    (1282.0, 0.5427, 222.8603),
    (1244.0, 0.9161, 2.4477),
    (1221.0, 0.1990, 108.4612),
    (1151.0, 4.1790, 33.6796),
    (1150.0, 0.9334, 3.1814),
    (1090.0, 1.7750, 12.5302),
    (1072.0, 0.2356, 62.2514),
    (946.0, 1.192, 127.472),
    (708.0, 5.183, 213.299),
    (653.0, 0.966, 78.714),
    (628.0, 0.182, 984.600),
    (607.0, 5.432, 529.691),
    (559.0, 3.358, 0.521),
    (524.0, 2.013, 299.126),
    (483.0, 2.106, 0.963),
    (471.0, 1.407, 184.727),
    (467.0, 0.415, 145.110),
    (434.0, 5.521, 183.243),
    (405.0, 5.987, 8.077),
    (399.0, 0.338, 415.552),
    (396.0, 5.870, 351.817),
    (379.0, 2.350, 56.622),
    (310.0, 5.833, 145.631),
    (300.0, 5.644, 22.091),
    (294.0, 5.839, 39.618),
    (252.0, 1.637, 221.376),
    (249.0, 4.746, 225.829),
    (239.0, 2.350, 137.033),
    (224.0, 0.516, 84.343),
)

URANUS_L1: tuple[Term, ...] = (
    (7502543122.0, 0.0, 0.0),
    (154458.0, 5.242017, 74.781599),
    (24456.0, 1.71256, 1.48447),
    (9258.0, 0.4284, 11.0457),
    (8266.0, 1.5022, 63.7359),
    (7842.0, 1.3198, 149.5632),
    (3899.0, 0.4648, 3.9322),
    (2284.0, 4.1737, 76.2661),
    (1927.0, 0.5301, 2.9689),
    (1233.0, 1.5863, 70.8494),
    (791.0, 5.436, 3.181),
    (767.0, 1.996, 73.297),
    (482.0, 2.984, 85.827),
    (450.0, 4.138, 138.517),
    (446.0, 3.723, 224.345),
    (427.0, 4.731, 71.813),
    (354.0, 2.583, 148.079),
    (348.0, 2.454, 9.561),
    (317.0, 5.579, 52.690),
    (206.0, 2.363, 2.448),
    (189.0, 4.202, 56.622),
    (184.0, 0.284, 151.048),
    (180.0, 5.684, 12.530),
    (171.0, 3.001, 78.714),
    (158.0, 2.909, 0.963),
    (155.0, 5.591, 4.453),
    (154.0, 4.652, 35.164),
    (152.0, 2.942, 77.751),
    (143.0, 2.590, 62.251),
    (121.0, 4.148, 127.472),
    (116.0, 3.732, 65.220),
    (102.0, 4.188, 145.631),
    (102.0, 6.034, 0.112),
    (88.0, 3.99, 18.16),
    (88.0, 6.16, 202.25),
    (81.0, 2.64, 22.09),
    (72.0, 6.05, 70.33),
    (69.0, 4.05, 77.96),
    (59.0, 3.70, 67.67),
    (47.0, 3.54, 351.82),
    (44.0, 5.91, 7.11),
    (43.0, 5.72, 5.42),
    (39.0, 4.92, 222.86),
    (36.0, 5.90, 33.68),
    (36.0, 3.29, 8.08),
    (36.0, 3.33, 71.60),
    (35.0, 5.08, 38.13),
    (31.0, 5.62, 984.60),
    (31.0, 5.50, 59.80),
    (31.0, 5.46, 160.61),
    (30.0, 1.66, 447.80),
    (29.0, 1.15, 462.02),
    (29.0, 4.52, 84.34),
    (27.0, 5.54, 131.40),
    (27.0, 6.15, 299.13),
    (26.0, 4.99, 137.03),
    (25.0, 5.74, 380.13),
)

URANUS_L2: tuple[Term, ...] = (
    (53033.0, 0.0, 0.0),
    (2358.0, 2.2601, 74.7816),
    (769.0, 4.526, 11.046),
    (552.0, 3.258, 63.736),
    (542.0, 2.276, 3.932),
    (529.0, 4.923, 1.484),
    (258.0, 3.691, 3.181),
    (239.0, 5.858, 149.563),
    (182.0, 6.218, 70.849),
    (54.0, 1.44, 76.27),
    (49.0, 6.03, 56.62),
    (45.0, 3.91, 2.45),
    (45.0, 0.81, 85.83),
    (38.0, 1.78, 52.69),
    (37.0, 4.46, 2.97),
    (33.0, 0.86, 9.56),
    (29.0, 5.10, 73.30),
    (24.0, 2.11, 18.16),
    (22.0, 5.99, 138.52),
    (22.0, 4.82, 78.71),
    (21.0, 2.40, 77.96),
    (21.0, 2.17, 224.34),
    (17.0, 2.54, 145.63),
    (17.0, 3.47, 12.53),
    (12.0, 0.02, 22.09),
    (11.0, 0.08, 127.47),
    (10.0, 5.16, 71.60),
    (10.0, 4.46, 62.25),
    (9.0, 4.26, 7.11),
    (8.0, 5.50, 67.67),
    (7.0, 1.25, 5.42),
    (6.0, 3.36, 447.80),
    (6.0, 5.45, 65.22),
    (6.0, 4.52, 151.05),
    (6.0, 5.73, 462.02),
)

URANUS_L3: tuple[Term, ...] = (
    (121.0, 0.024, 74.782),
    (68.0, 4.12, 3.93),
    (53.0, 2.39, 11.05),
    (46.0, 0.0, 0.0),
    (45.0, 2.04, 3.18),
    (44.0, 2.96, 1.48),
    (25.0, 4.89, 63.74),
    (21.0, 4.55, 70.85),
    (20.0, 2.31, 149.56),
    (9.0, 1.58, 56.62),
    (4.0, 0.23, 18.16),
    (4.0, 5.39, 76.27),
    (4.0, 0.95, 77.96),
    (3.0, 4.98, 85.83),
    (3.0, 4.13, 52.69),
    (3.0, 0.37, 78.71),
    (2.0, 0.86, 145.63),
    (2.0, 5.66, 9.56),
)

URANUS_L4: tuple[Term, ...] = (
    (114.0, 3.142, 0.0),
    (6.0, 4.58, 74.78),
    (3.0, 0.35, 11.05),
    (1.0, 3.42, 56.62),
)

URANUS_B0: tuple[Term, ...] = (
    (1346278.0, 2.6187781, 74.7815986),
    (62341.0, 5.08111, 149.56320),
    (61601.0, 3.14159, 0.0),
    (9964.0, 1.6160, 76.2661),
    (9926.0, 0.5763, 73.2971),
    (3259.0, 1.2612, 224.3448),
    (2972.0, 2.2437, 1.4845),
    (2010.0, 6.0555, 148.0787),
    (1522.0, 0.2796, 63.7359),
    (924.0, 4.038, 151.048),
    (761.0, 6.140, 71.813),
    (522.0, 3.321, 138.517),
    (463.0, 0.743, 85.827),
    (437.0, 3.381, 529.691),
    (435.0, 0.341, 77.751),
    (431.0, 3.554, 213.299),
    (420.0, 5.213, 11.046),
    (245.0, 0.788, 2.969),
    (233.0, 2.257, 222.860),
    (216.0, 1.591, 38.133),
    (180.0, 3.725, 299.126),
    (175.0, 1.236, 146.594),
    (174.0, 1.937, 380.128),
    (160.0, 5.336, 111.430),
    (144.0, 5.962, 35.164),
    (116.0, 5.739, 70.849),
    (106.0, 0.941, 70.328),
    (102.0, 2.619, 78.714),
)

URANUS_B1: tuple[Term, ...] = (
    (206366.0, 4.123943, 74.781599),
    (8563.0, 0.3382, 149.5632),
    (1726.0, 2.1219, 73.2971),
    (1374.0, 0.0, 0.0),
    (1369.0, 3.0686, 76.2661),
    (451.0, 3.777, 1.484),
    (400.0, 2.848, 224.345),
    (307.0, 1.255, 148.079),
    (154.0, 3.786, 63.736),
    (112.0, 5.573, 151.048),
    (111.0, 5.329, 138.517),
    (83.0, 3.59, 71.81),
    (56.0, 3.40, 85.83),
    (54.0, 1.70, 77.75),
    (42.0, 1.21, 11.05),
    (41.0, 4.45, 78.71),
    (32.0, 3.77, 222.86),
    (30.0, 2.56, 2.97),
    (27.0, 5.34, 213.30),
    (26.0, 0.42, 380.13),
)

URANUS_B2: tuple[Term, ...] = (
    (9212.0, 5.8004, 74.7816),
    (557.0, 0.0, 0.0),
    (286.0, 2.177, 149.563),
    (95.0, 3.84, 73.30),
    (45.0, 4.88, 76.27),
    (20.0, 5.46, 1.48),
    (15.0, 0.88, 138.52),
    (14.0, 2.85, 148.08),
    (14.0, 5.07, 63.74),
    (10.0, 5.00, 224.34),
    (8.0, 6.27, 78.71),
)

URANUS_B3: tuple[Term, ...] = (
    (268.0, 1.251, 74.782),
    (11.0, 3.14, 0.0),
    (6.0, 4.01, 149.56),
    (3.0, 5.78, 73.30),
)

URANUS_B4: tuple[Term, ...] = (
    (6.0, 2.85, 74.78),
)

URANUS_R0: tuple[Term, ...] = (
    (1921264848.0, 0.0, 0.0),
    (88784984.0, 5.60377527, 74.78159857),
    (3440836.0, 0.3283610, 73.2971259),
    (2055653.0, 1.7829517, 149.5631971),
    (649322.0, 4.522473, 76.266071),
    (602248.0, 3.860038, 63.735898),
    (496404.0, 1.401399, 454.909367),
    (338526.0, 1.580027, 138.517497),
    (243508.0, 1.570866, 71.812653),
    (190522.0, 1.998094, 1.484473),
    (161858.0, 2.791379, 148.078724),
    (143706.0, 1.383686, 11.045700),
    (93192.0, 0.17437, 36.64856),
    (89806.0, 3.66105, 109.94569),
    (71424.0, 0.11509, 70.84945),
    (46677.0, 0.96313, 35.16409),
)

URANUS_R1: tuple[Term, ...] = (
    (1479896.0, 3.6720571, 74.7815986),
    (71212.0, 6.22601, 63.73590),
    (68627.0, 6.13411, 149.56320),
    (24060.0, 3.14159, 0.0),
    (21468.0, 2.60177, 76.26607),
    (20857.0, 5.24625, 11.04570),
    (11405.0, 0.01848, 70.84945),
    (7497.0, 0.4236, 73.2971),
    (4244.0, 1.4169, 85.8273),
    (3927.0, 3.1551, 71.8127),
    (3578.0, 2.3116, 224.3448),
    (3506.0, 2.5835, 138.5175),
    (3229.0, 5.2550, 3.9322),
    (3060.0, 0.1532, 1.4845),
    (2564.0, 0.9808, 148.0787),
    (2429.0, 3.9944, 52.6902),
    (1645.0, 2.6535, 127.4718),
    (1584.0, 1.4305, 78.7138),
    (1508.0, 5.0600, 151.0477),
    (1490.0, 2.6756, 56.6224),
    (1413.0, 4.5746, 202.2534),
    (1403.0, 1.3699, 77.7505),
    (1228.0, 1.0470, 62.2514),
    (1033.0, 0.2646, 131.4039),
    (992.0, 2.172, 65.220),
    (862.0, 5.055, 351.817),
    (744.0, 3.076, 35.164),
    (687.0, 2.499, 77.963),
    (647.0, 4.473, 70.328),
    (624.0, 0.863, 9.561),
    (604.0, 0.907, 984.600),
    (575.0, 3.231, 447.796),
    (562.0, 2.718, 462.023),
    (530.0, 5.917, 213.299),
    (528.0, 5.151, 2.969),
)

URANUS_R2: tuple[Term, ...] = (
    (22440.0, 0.69953, 74.78160),
    (4727.0, 1.6990, 63.7359),
    (1682.0, 4.6483, 70.8494),
    (1650.0, 3.0966, 11.0457),
    (1434.0, 3.5212, 149.5632),
    (770.0, 0.0, 0.0),
    (500.0, 6.172, 76.266),
    (461.0, 0.767, 3.932),
    (390.0, 4.496, 56.622),
    (390.0, 5.527, 85.827),
    (292.0, 0.204, 52.690),
    (287.0, 3.534, 73.297),
    (273.0, 3.847, 138.517),
    (220.0, 1.964, 131.404),
    (216.0, 0.848, 77.963),
    (205.0, 3.248, 78.714),
    (149.0, 4.898, 127.472),
    (129.0, 2.081, 3.181),
)

URANUS_R3: tuple[Term, ...] = (
    (1164.0, 4.7345, 74.7816),
    (212.0, 3.343, 63.736),
    (196.0, 2.980, 70.849),
    (105.0, 0.958, 11.046),
    (73.0, 1.00, 149.56),
    (72.0, 0.03, 56.62),
    (55.0, 2.59, 3.93),
    (36.0, 5.65, 77.96),
    (34.0, 3.82, 76.27),
    (32.0, 3.60, 131.40),
)

URANUS_R4: tuple[Term, ...] = (
    (53.0, 3.01, 74.78),
    (10.0, 1.91, 56.62),
)

NEPTUNE_L0: tuple[Term, ...] = (
    (531188633.0, 0.0, 0.0),
    (1798476.0, 2.9010127, 38.1330356),
    (1019728.0, 0.4858092, 1.4844727),
    (124532.0, 4.830081, 36.648563),
    (42064.0, 5.41055, 2.96895),
    (37715.0, 6.09222, 35.16409),
    (33785.0, 1.24489, 76.26607),
    (16483.0, 0.00008, 491.55793),
    (9199.0, 4.9375, 39.6175),
    (8994.0, 0.2746, 175.1661),
    (4216.0, 1.9871, 73.2971),
    (3365.0, 1.0359, 33.6796),
    (2285.0, 4.2061, 4.4534),
    (1434.0, 2.7834, 74.7816),
    (900.0, 2.076, 109.946),
    (745.0, 3.190, 71.813),
    (506.0, 5.748, 114.399),
    (400.0, 0.350, 1021.249),
    (345.0, 3.462, 41.102),
    (340.0, 3.304, 77.751),
    (323.0, 2.248, 32.195),
    (306.0, 0.497, 0.521),
    (287.0, 4.505, 0.048),
    (282.0, 2.246, 146.594),
    (267.0, 4.889, 0.963),
    (252.0, 5.782, 388.465),
    (245.0, 1.247, 9.561),
    (233.0, 2.505, 137.033),
    (227.0, 1.797, 453.425),
    (170.0, 3.324, 108.461),
    (151.0, 2.192, 33.940),
    (150.0, 2.997, 5.938),
    (148.0, 0.859, 111.430),
    (119.0, 3.677, 2.448),
    (109.0, 2.416, 183.243),
    (103.0, 0.041, 0.261),
    (103.0, 4.404, 70.328),
    (102.0, 5.705, 0.112),
)

NEPTUNE_L1: tuple[Term, ...] = (
    (3837687717.0, 0.0, 0.0),
    (16604.0, 4.86319, 1.48447),
    (15807.0, 2.27923, 38.13304),
    (3335.0, 3.6820, 76.2661),
    (1306.0, 3.6732, 2.9689),
    (605.0, 1.505, 35.164),
    (179.0, 3.453, 39.618),
    (107.0, 2.451, 4.453),
    (106.0, 2.755, 33.680),
    (73.0, 5.49, 36.65),
    (57.0, 1.86, 114.40),
    (57.0, 5.22, 0.52),
    (35.0, 4.52, 74.78),
    (32.0, 5.90, 77.75),
    (30.0, 3.67, 388.47),
    (29.0, 5.17, 9.56),
    (29.0, 5.17, 2.45),
    (26.0, 5.25, 168.05),
)

NEPTUNE_L2: tuple[Term, ...] = (
    (53893.0, 0.0, 0.0),
    (296.0, 1.855, 1.484),
    (281.0, 1.191, 38.133),
    (270.0, 5.721, 76.266),
    (23.0, 1.21, 2.97),
    (9.0, 4.43, 35.16),
    (7.0, 0.54, 2.45),
)

NEPTUNE_L3: tuple[Term, ...] = (
    (31.0, 0.0, 0.0),
    (15.0, 1.35, 76.27),
    (12.0, 6.04, 1.48),
    (12.0, 6.11, 38.13),
)

NEPTUNE_L4: tuple[Term, ...] = (
    (114.0, 3.142, 0.0),
)

NEPTUNE_B0: tuple[Term, ...] = (
    (3088623.0, 1.4410437, 38.1330356),
    (27780.0, 5.91272, 76.26607),
    (27624.0, 0.0, 0.0),
    (15448.0, 3.50877, 39.61751),
    (15355.0, 2.52124, 36.64856),
    (2000.0, 1.5100, 74.7816),
    (1968.0, 4.3778, 1.4845),
    (1015.0, 3.2156, 35.1641),
    (606.0, 2.802, 73.297),
    (595.0, 2.129, 41.102),
    (589.0, 3.187, 2.969),
    (402.0, 4.169, 114.399),
    (280.0, 1.682, 77.751),
    (262.0, 3.767, 213.299),
    (254.0, 3.271, 453.425),
    (206.0, 4.257, 529.691),
    (140.0, 3.530, 137.033),
)

NEPTUNE_B1: tuple[Term, ...] = (
    (227279.0, 3.807931, 38.133036),
    (1803.0, 1.9758, 76.2661),
    (1433.0, 3.1416, 0.0),
    (1386.0, 4.8256, 36.6486),
    (1073.0, 6.0805, 39.6175),
    (148.0, 2.285, 74.782),
    (136.0, 0.474, 1.484),
    (70.0, 6.19, 35.16),
    (52.0, 0.12, 73.30),
    (43.0, 0.65, 41.10),
)

NEPTUNE_B2: tuple[Term, ...] = (
    (9691.0, 5.5712, 38.1330),
    (79.0, 3.63, 76.27),
    (72.0, 0.45, 36.65),
    (59.0, 3.14, 0.0),
    (30.0, 1.61, 39.62),
    (6.0, 5.61, 74.78),
)

NEPTUNE_B3: tuple[Term, ...] = (
    (273.0, 1.017, 38.133),
    (2.0, 0.0, 0.0),
    (2.0, 2.37, 36.65),
    (2.0, 5.33, 39.62),
)

NEPTUNE_B4: tuple[Term, ...] = (
    (6.0, 2.67, 38.13),
)

NEPTUNE_R0: tuple[Term, ...] = (
    (3007013206.0, 0.0, 0.0),
    (27062259.0, 1.32999459, 38.13303564),
    (1691764.0, 3.2518614, 36.6485629),
    (807831.0, 5.185928, 1.484473),
    (537761.0, 4.521139, 35.164090),
    (495726.0, 1.571057, 491.557929),
    (274572.0, 1.845523, 175.166060),
    (135134.0, 3.372206, 39.617508),
    (121802.0, 5.797544, 76.266071),
    (100895.0, 0.377027, 73.297126),
    (69792.0, 3.79617, 2.96895),
    (46688.0, 5.74938, 33.67962),
    (24594.0, 0.50802, 109.94569),
    (16939.0, 1.59422, 71.81265),
    (14230.0, 1.07786, 74.78160),
    (12012.0, 1.92062, 1021.24889),
    (8395.0, 0.6782, 146.5943),
    (7572.0, 1.0715, 388.4652),
    (5721.0, 2.5906, 4.4534),
    (4840.0, 1.9069, 41.1020),
    (4483.0, 2.9057, 529.6910),
    (4421.0, 1.7499, 108.4612),
    (4354.0, 0.6799, 32.1951),
    (4270.0, 3.4134, 453.4249),
    (3381.0, 0.8481, 183.2428),
    (2881.0, 1.9860, 137.0330),
    (2879.0, 3.6742, 350.3321),
    (2636.0, 3.0976, 213.2991),
    (2530.0, 5.7984, 490.0735),
    (2523.0, 0.4863, 493.0424),
    (2306.0, 2.8096, 70.3282),
    (2087.0, 0.6186, 33.9402),
)

NEPTUNE_R1: tuple[Term, ...] = (
    (236339.0, 0.704980, 38.133036),
    (13220.0, 3.32015, 1.48447),
    (8622.0, 6.2163, 35.1641),
    (2702.0, 1.8814, 39.6175),
    (2155.0, 2.0943, 2.9689),
    (2153.0, 5.1687, 76.2661),
    (1603.0, 0.0, 0.0),
    (1464.0, 1.1842, 33.6796),
    (1136.0, 3.9189, 36.6486),
    (898.0, 5.241, 388.465),
    (790.0, 0.533, 168.053),
    (760.0, 0.021, 182.280),
    (607.0, 1.077, 1021.249),
    (572.0, 3.401, 484.444),
    (561.0, 2.887, 498.671),
)

NEPTUNE_R2: tuple[Term, ...] = (
    (4247.0, 5.8991, 38.1330),
    (218.0, 0.346, 1.484),
    (163.0, 2.239, 168.053),
    (156.0, 4.594, 182.280),
    (127.0, 2.848, 35.164),
)

NEPTUNE_R3: tuple[Term, ...] = (
    (166.0, 4.552, 38.133),
)

_PLANETS = {
    VENUS: (
        (VENUS_L0, VENUS_L1, VENUS_L2, VENUS_L3, VENUS_L4, VENUS_L5),
        (VENUS_B0, VENUS_B1, VENUS_B2, VENUS_B3, VENUS_B4),
        (VENUS_R0, VENUS_R1, VENUS_R2, VENUS_R3, VENUS_R4),
    ),
    MARS: (
        (MARS_L0, MARS_L1, MARS_L2, MARS_L3, MARS_L4, MARS_L5),
        (MARS_B0, MARS_B1, MARS_B2, MARS_B3, MARS_B4),
        (MARS_R0, MARS_R1, MARS_R2, MARS_R3, MARS_R4),
    ),
    JUPITER: (
        (JUPITER_L0, JUPITER_L1, JUPITER_L2, JUPITER_L3, JUPITER_L4, JUPITER_L5),
        (JUPITER_B0, JUPITER_B1, JUPITER_B2, JUPITER_B3, JUPITER_B4, JUPITER_B5),
        (JUPITER_R0, JUPITER_R1, JUPITER_R2, JUPITER_R3, JUPITER_R4, JUPITER_R5),
    ),
    SATURN: (
        (SATURN_L0, SATURN_L1, SATURN_L2, SATURN_L3, SATURN_L4, SATURN_L5),
        (SATURN_B0, SATURN_B1, SATURN_B2, SATURN_B3, SATURN_B4, SATURN_B5),
        (SATURN_R0, SATURN_R1, SATURN_R2, SATURN_R3, SATURN_R4, SATURN_R5),
    ),
    URANUS: (
        (URANUS_L0, URANUS_L1, URANUS_L2, URANUS_L3, URANUS_L4),
        (URANUS_B0, URANUS_B1, URANUS_B2, URANUS_B3, URANUS_B4),
        (URANUS_R0, URANUS_R1, URANUS_R2, URANUS_R3, URANUS_R4),
    ),
    NEPTUNE: (
        (NEPTUNE_L0, NEPTUNE_L1, NEPTUNE_L2, NEPTUNE_L3, NEPTUNE_L4),
        (NEPTUNE_B0, NEPTUNE_B1, NEPTUNE_B2, NEPTUNE_B3, NEPTUNE_B4),
        (NEPTUNE_R0, NEPTUNE_R1, NEPTUNE_R2, NEPTUNE_R3),
    ),
}

VSOP87_PLANETS = tuple(_PLANETS)

def planet_heliocentric(body: int, tjd: float) -> tuple[float, float, float]:
    """Heliocentric ecliptic longitude, latitude (radians, FK5 frame of date) and distance (AU).

    Raises:
        KeyError: body has no VSOP87 table here.
    """
    longitude, latitude, radius = _PLANETS[body]
    tau = (tjd - J2000) / DAYS_PER_JULIAN_MILLENNIUM
    lon, lat = fk5_correction(sum_series(longitude, tau), sum_series(latitude, tau), tau)
    return (lon, lat, sum_series(radius, tau))
