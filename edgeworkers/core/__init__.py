"""EdgeWorkers core: exceptions and request validation"""
