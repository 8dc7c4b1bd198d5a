from .sift import sift_up, sift_down, heapify, verify_heap
from .ordering import reverse_order, by_key, by_item
from .result import PushOutcome, PushResult
from .shared import shared_buffer
from .heap import BoundedMinHeap, OverlayHeap, BoundedHeap
from .topk import nlargest, nsmallest
