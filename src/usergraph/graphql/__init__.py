"""
GraphQL package
Schema, resolvers and the synchronous executor for the user directory
"""
