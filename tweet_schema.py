
# 
# Copyright (c) 2020, 2021, John Grundback
# All rights reserved.
# 

import logging

from graphql import build_schema, assert_valid_schema
from graphql.type import GraphQLObjectType

logger = logging.getLogger(__name__)

# 
# 
# 

type_defs = """

type User {
    id: ID!
    firstName: String!
    lastName: String!
    fullName: String!
}

type Tweet {
    id: ID!
    text: String
    author: User!
}

type Query {
    allUsers: [User!]!
    allTweets: [Tweet!]!
    tweet(id: ID): Tweet!
}

type Mutation {
    postTweet(text: String, userId: ID): Tweet!
    deleteTweet(id: ID): Boolean
}

schema {
  query: Query
  mutation: Mutation
}

"""

# 
# Resolvers take (root, info, **args). The store travels in the
# execution context so every request sees the same Store instance.
# 

def _store(info):
    return info.context["store"]


def query_all_tweets_resolver(value, info):
    return _store(info).list_tweets()

def query_tweet_resolver(value, info, id=None):
    # None here is reported by the engine, Query.tweet is non-null
    return _store(info).find_tweet(id)

def query_all_users_resolver(value, info):
    return _store(info).list_users()

def mutation_post_tweet_resolver(value, info, text=None, userId=None):
    return _store(info).append_tweet(text, userId)

def mutation_delete_tweet_resolver(value, info, id=None):
    return _store(info).remove_tweet(id)

def user_full_name_resolver(user, info):
    return "%s %s" % (user["firstName"], user["lastName"])

def tweet_author_resolver(tweet, info):
    # weak reference, a dangling userId resolves to None
    return _store(info).find_user(tweet.get("userId"))


resolvers = {
    "Query": {
        "allTweets": query_all_tweets_resolver,
        "tweet": query_tweet_resolver,
        "allUsers": query_all_users_resolver,
    },
    "Mutation": {
        "postTweet": mutation_post_tweet_resolver,
        "deleteTweet": mutation_delete_tweet_resolver,
    },
    "User": {
        "fullName": user_full_name_resolver,
    },
    "Tweet": {
        "author": tweet_author_resolver,
    },
}

# 
# 
# 

def build_executable_schema(source_schema, resolvers):
    """
    Build a GraphQLSchema from SDL and attach resolver functions.

    resolvers maps type names to {field name: resolver}. Fields without
    an entry keep the default resolver, which reads the key of the same
    name from a dict root.
    """
    schema = build_schema(source_schema)

    for type_name, fields in resolvers.items():
        object_type = schema.get_type(type_name)
        if not isinstance(object_type, GraphQLObjectType):
            raise ValueError("Unknown object type %r in resolvers" % type_name)
        for field_name, resolver in fields.items():
            field = object_type.fields.get(field_name)
            if field is None:
                raise ValueError(
                    "Unknown field %s.%s in resolvers" % (type_name, field_name))
            field.resolve = resolver
            logger.debug("bound resolver %s.%s", type_name, field_name)

    assert_valid_schema(schema)
    return schema


tweet_schema = build_executable_schema(type_defs, resolvers)
