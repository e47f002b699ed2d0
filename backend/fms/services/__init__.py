"""
Services package: the behaviour shared by every resource.

    crud.py        generic create/update/list/get/delete template
    resources.py   one CrudResource per entity type
    ownership.py   principal-vs-owner visibility predicate
    validation.py  best-effort domain checks (ValidationOutcome)
    events.py      Kafka side-effect emitter
    projections.py event payloads published to Kafka
    search.py      Elasticsearch mirror for notifications
"""
