"""Classic data structures and algorithms: sorting, searching, bits, heaps,
linked lists, stacks, queues, tries, range queries, trees and graphs."""

__version__ = "0.1.0"