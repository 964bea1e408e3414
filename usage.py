import os
import sys

import simplejson as json

from python_graphql_client import GraphqlClient

endpoint = os.environ.get("GRAPHQL_ENDPOINT", "http://localhost:5000/graphql")

all_tweets_query = """
    query allTweets {
        allTweets {
            id
            text
            author {
                fullName
            }
        }
    }
"""

post_tweet_mutation = """
    mutation postTweet($text: String, $userId: ID) {
        postTweet(text: $text, userId: $userId) {
            id
            text
            author {
                fullName
            }
        }
    }
"""

delete_tweet_mutation = """
    mutation deleteTweet($id: ID) {
        deleteTweet(id: $id)
    }
"""


def run(client, args):
    """
    usage.py                      list all tweets
    usage.py post TEXT USER_ID    post a tweet
    usage.py delete ID            delete a tweet
    """
    if not args:
        return client.execute(query=all_tweets_query)

    command = args[0]
    if command == "post" and len(args) == 3:
        return client.execute(
            query=post_tweet_mutation,
            variables={"text": args[1], "userId": args[2]}
        )
    if command == "delete" and len(args) == 2:
        return client.execute(
            query=delete_tweet_mutation,
            variables={"id": args[1]}
        )

    raise SystemExit(run.__doc__)


def main():
    client = GraphqlClient(
        endpoint=endpoint
    )
    result = run(client, sys.argv[1:])
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
