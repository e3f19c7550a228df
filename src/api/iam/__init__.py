"""IAM bounded context.

Identity and access concerns of the suite: the tenant scope of a request
and the dependencies routes use to read or require it.
"""
