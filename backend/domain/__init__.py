"""Domain layer per la user directory.

Utenti, grafo dei follow e notifiche, disaccoppiati dalla presentazione
GraphQL e dall'infrastruttura.
"""
