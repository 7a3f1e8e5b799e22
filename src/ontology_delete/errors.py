"""
Errors returned by the Ontology Delete web service.
"""

from framework.errors import ErrorCatalog, ErrorLevel


ONTOLOGY_DELETE_ERRORS = ErrorCatalog("/ws/ontology/delete/", {
    "_200": {
        "id": "WS-ONTOLOGY-DELETE-200",
        "level": ErrorLevel.WARNING.value,
        "name": "Unknown function call",
        "description": "The function call being requested is unknown or unsupported by this Ontology Delete web service endpoint",
    },
    "_201": {
        "id": "WS-ONTOLOGY-DELETE-201",
        "level": ErrorLevel.WARNING.value,
        "name": "No Ontology URI defined for this request",
        "description": "No Ontology URI defined for this request",
    },
    "_202": {
        "id": "WS-ONTOLOGY-DELETE-202",
        "level": ErrorLevel.WARNING.value,
        "name": "No Property URI defined for this request",
        "description": "No Property URI defined for this request",
    },
    "_203": {
        "id": "WS-ONTOLOGY-DELETE-203",
        "level": ErrorLevel.WARNING.value,
        "name": "No Named Individual URI defined for this request",
        "description": "No Named Individual URI defined for this request",
    },
    "_204": {
        "id": "WS-ONTOLOGY-DELETE-204",
        "level": ErrorLevel.WARNING.value,
        "name": "No Class URI defined for this request",
        "description": "No Class URI defined for this request",
    },
    "_300": {
        "id": "WS-ONTOLOGY-DELETE-300",
        "level": ErrorLevel.ERROR.value,
        "name": "Can't load the ontology",
        "description": "The ontology can't be loaded by the endpoint",
    },
    "_301": {
        "id": "WS-ONTOLOGY-DELETE-301",
        "level": ErrorLevel.ERROR.value,
        "name": "Can't delete the class",
        "description": "The class can't be removed from the ontology",
    },
    "_302": {
        "id": "WS-ONTOLOGY-DELETE-302",
        "level": ErrorLevel.ERROR.value,
        "name": "Can't delete the property",
        "description": "The property can't be removed from the ontology",
    },
    "_303": {
        "id": "WS-ONTOLOGY-DELETE-303",
        "level": ErrorLevel.ERROR.value,
        "name": "Can't delete the named individual",
        "description": "The named individual can't be removed from the ontology",
    },
    "_304": {
        "id": "WS-ONTOLOGY-DELETE-304",
        "level": ErrorLevel.ERROR.value,
        "name": "Can't delete the ontology",
        "description": "The ontology can't be removed from the ontology store",
    },
    "_305": {
        "id": "WS-ONTOLOGY-DELETE-305",
        "level": ErrorLevel.ERROR.value,
        "name": "No ontology store session available",
        "description": "All the ontology store sessions are busy, try again later",
    },
})
