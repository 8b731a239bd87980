# Six-vertex LineString through Washington, DC (lon, lat).
DC_COORDS = [
    [-77.0316696166992, 38.878605901789236],
    [-77.02960968017578, 38.88194668656296],
    [-77.02033996582031, 38.88408470638821],
    [-77.02566146850586, 38.885821800123196],
    [-77.02188491821289, 38.88956308852534],
    [-77.01982498168944, 38.89236892551996],
]
